"""Tag response items."""

from datetime import datetime

from pydantic import BaseModel

from materia.domain.model.tag import Tag


class TagItem(BaseModel):
    """Tag in responses."""

    id: str
    name: str
    color: str
    font_color: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, tag: Tag) -> "TagItem":
        return cls(
            id=str(tag.id),
            name=tag.name,
            color=tag.color,
            font_color=tag.font_color,
            created_at=tag.created_at,
            updated_at=tag.updated_at,
        )
