"""Material aggregate root."""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field, model_validator

from materia.domain.model.characteristic_value import LiveValue
from materia.domain.model.common import DomainInput, DomainModel
from materia.domain.value import (
    CharacteristicId,
    Description,
    EntityId,
    MaterialId,
    Name,
    TagId,
)


class MaterialCharacteristic(DomainModel):
    """Value of one characteristic on a material (None when left empty)."""

    characteristic_id: CharacteristicId
    value: Optional[LiveValue] = None


class Material(DomainModel):
    """Material aggregate root.

    Characteristics are kept in display order. Materials are soft deleted:
    a deleted material keeps its tags and values but no longer counts as
    an active reference.
    """

    id: MaterialId
    entity_id: EntityId
    name: str = Field(min_length=2, max_length=64)
    description: str = Field(default="", max_length=255)
    tag_ids: list[TagId] = Field(default_factory=list)
    characteristics: list[MaterialCharacteristic] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    deleted_at: Optional[datetime] = None

    @property
    def is_active(self) -> bool:
        return self.deleted_at is None

    @property
    def characteristic_ids(self) -> list[CharacteristicId]:
        return [mc.characteristic_id for mc in self.characteristics]

    @model_validator(mode="after")
    def validate_unique_references(self) -> "Material":
        """A tag or characteristic can only be attached once."""
        if len(set(self.tag_ids)) != len(self.tag_ids):
            raise ValueError("A tag can only be attached once to a material")
        ids = self.characteristic_ids
        if len(set(ids)) != len(ids):
            raise ValueError("A characteristic can only be attached once to a material")
        return self


class CharacteristicValueInput(DomainInput):
    """Value sent for one characteristic of a material.

    The value is kept raw here: its shape depends on the characteristic's
    type, which is only known once the characteristic is loaded.
    """

    characteristic_id: CharacteristicId = Field(alias="characteristicId")
    value: Any = None


class MaterialData(DomainInput):
    """Data sent to create or update a material.

    Characteristic values are listed in display order.
    """

    name: Name
    description: Description = ""
    tag_ids: list[TagId] = Field(default_factory=list, alias="tagIds")
    characteristics: list[CharacteristicValueInput] = Field(
        default_factory=list, alias="characteristicValues"
    )
