"""Tag entity for labelling materials."""

from datetime import datetime

from pydantic import Field

from materia.domain.model.common import DomainInput, DomainModel
from materia.domain.value import EntityId, HexColor, Name, TagId


class Tag(DomainModel):
    """Coloured label attached to materials.

    Tags belong to one entity and are unique by name within it by convention.
    """

    id: TagId
    entity_id: EntityId
    name: str = Field(min_length=2, max_length=64)
    color: HexColor  # Background colour, e.g. #ff0000
    font_color: HexColor
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


class TagWithCount(Tag):
    """Tag annotated with the number of active materials carrying it."""

    material_count: int = Field(default=0, ge=0)


class TagData(DomainInput):
    """Data sent to create or update a tag."""

    name: Name
    color: HexColor
    font_color: HexColor = Field(alias="fontColor")
