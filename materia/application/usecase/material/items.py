"""Material response items."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel

from materia.domain.model.characteristic_value import LiveValue
from materia.domain.model.material import Material
from materia.domain.model.tag import Tag

from ..tag.items import TagItem


def dump_value(value: Optional[LiveValue]) -> Optional[dict[str, Any]]:
    """Serialize a characteristic value the way clients send it back."""
    if value is None:
        return None
    return value.model_dump(
        mode="json", by_alias=True, exclude={"file_to_add", "file_to_delete"}
    )


class CharacteristicValueItem(BaseModel):
    """Value of one characteristic of a material."""

    characteristic_id: str
    value: Optional[dict[str, Any]]


class MaterialItem(BaseModel):
    """Material in responses."""

    id: str
    name: str
    description: str
    tags: list[TagItem]
    characteristics: list[CharacteristicValueItem]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, material: Material, tags: dict[Any, Tag]) -> "MaterialItem":
        """Build the item, resolving tag ids with the given tags."""
        return cls(
            id=str(material.id),
            name=material.name,
            description=material.description,
            tags=[
                TagItem.from_domain(tags[tag_id])
                for tag_id in material.tag_ids
                if tag_id in tags
            ],
            characteristics=[
                CharacteristicValueItem(
                    characteristic_id=str(mc.characteristic_id),
                    value=dump_value(mc.value),
                )
                for mc in material.characteristics
            ],
            created_at=material.created_at,
            updated_at=material.updated_at,
        )
