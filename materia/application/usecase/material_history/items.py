"""Material history response items."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel

from materia.domain.model.material_history import MaterialHistory


class MaterialHistoryItem(BaseModel):
    """Snapshot in responses. Tags and characteristics are kept as recorded."""

    id: str
    material_id: str
    name: str
    description: str
    tags: list[dict[str, Any]]
    characteristics: list[dict[str, Any]]
    created_at: datetime

    @classmethod
    def from_domain(cls, history: MaterialHistory) -> "MaterialHistoryItem":
        return cls(
            id=str(history.id),
            material_id=str(history.material_id),
            name=history.name,
            description=history.description,
            tags=[t.model_dump(mode="json", by_alias=True) for t in history.tags],
            characteristics=[
                c.model_dump(mode="json", by_alias=True) for c in history.characteristics
            ],
            created_at=history.created_at,
        )
