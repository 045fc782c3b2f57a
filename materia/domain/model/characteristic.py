"""Characteristic definition entity."""

from datetime import datetime
from typing import Annotated, Optional

from pydantic import Field, StringConstraints, model_validator

from materia.domain.model.characteristic_value import classify
from materia.domain.model.common import DomainInput, DomainModel
from materia.domain.value import (
    CharacteristicId,
    CharacteristicType,
    Description,
    EntityId,
    Name,
    VariantGroup,
)

TrimmedStr = Annotated[str, StringConstraints(strip_whitespace=True)]


class Characteristic(DomainModel):
    """Custom field definition attachable to materials.

    The ``type`` is fixed at creation. ``options`` only exist for choice
    types (select, radio, ...), ``units`` only make sense for numeric ones.
    """

    id: CharacteristicId
    entity_id: EntityId
    name: str = Field(min_length=2, max_length=64)
    description: str = Field(default="", max_length=255)
    type: CharacteristicType
    options: Optional[list[str]] = None
    units: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def group(self) -> VariantGroup:
        """Variant group of this characteristic's type."""
        return classify(self.type)

    @model_validator(mode="after")
    def validate_options(self) -> "Characteristic":
        """Choice characteristics need options, the others must have none."""
        _check_options(self.type, self.options)
        return self


class CharacteristicWithCount(Characteristic):
    """Characteristic annotated with the number of materials using it."""

    material_count: int = Field(default=0, ge=0)


class NewCharacteristic(DomainInput):
    """Data required to create a characteristic."""

    name: Name
    description: Description = ""
    type: CharacteristicType
    options: Optional[list[TrimmedStr]] = None
    units: Optional[TrimmedStr] = None

    @model_validator(mode="after")
    def validate_options(self) -> "NewCharacteristic":
        _check_options(self.type, self.options)
        return self

    @property
    def clean_options(self) -> Optional[list[str]]:
        """Options without blanks or duplicates, in input order."""
        if self.options is None:
            return None
        return merge_options([], self.options)


class CharacteristicChanges(DomainInput):
    """Editable attributes of a characteristic.

    There is no ``type`` field: the type of a characteristic never changes.
    """

    name: Name
    description: Description = ""
    options: Optional[list[TrimmedStr]] = None


def merge_options(existing: list[str], new: list[str]) -> list[str]:
    """Append new non-blank options to existing ones, keeping them all.

    Args:
        existing: Options already defined
        new: Options sent by the client

    Returns:
        Existing options followed by the new ones not already present
    """
    merged = list(existing)
    for option in new:
        option = option.strip()
        if option and option not in merged:
            merged.append(option)
    return merged


def _check_options(
    characteristic_type: CharacteristicType, options: Optional[list[str]]
) -> None:
    is_choice = classify(characteristic_type) is VariantGroup.CHOICE
    if is_choice and options is None:
        raise ValueError(
            f"Options are required for {characteristic_type.value} characteristics"
        )
    if not is_choice and options is not None:
        raise ValueError(
            f"Options are not allowed for {characteristic_type.value} characteristics"
        )
