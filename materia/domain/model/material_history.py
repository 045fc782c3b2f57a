"""Material history snapshots.

A snapshot copies a material's tags and characteristic values by value, so
later edits to tags or characteristics never alter past snapshots. Snapshots
are append-only.
"""

from datetime import datetime

from pydantic import Field

from materia.domain.model.characteristic_value import CharacteristicSnapshot
from materia.domain.model.common import DomainModel
from materia.domain.value import MaterialHistoryId, MaterialId
from materia.domain.value.common import ValueObject


class TagSnapshot(ValueObject):
    """Tag as it looked when the snapshot was taken."""

    name: str
    color: str
    font_color: str = Field(alias="fontColor")


class MaterialHistory(DomainModel):
    """Point-in-time copy of a material."""

    id: MaterialHistoryId
    material_id: MaterialId
    name: str
    description: str = ""
    tags: list[TagSnapshot] = Field(default_factory=list)
    characteristics: list[CharacteristicSnapshot] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
