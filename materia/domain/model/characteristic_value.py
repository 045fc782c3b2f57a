"""Characteristic value shapes.

Each characteristic type belongs to exactly one variant group, and each group
has one value shape. Values exist in two forms:

- live: attached to a material, editable (files are references plus pending
  uploads/deletions)
- historical: copied into a material history snapshot (files are resolved to
  their stored name, type and path)

Every shape carries a ``kind`` discriminator equal to its group, so persisted
JSON is self-describing. Clients may also send the natural JSON shape of a
value (``"12"``, ``["a", "b"]``, ``true``, ``{"date": ...}``,
``{"from": ..., "to": ...}``, ``{"multiText": [...]}``, ``{"file": [...]}``);
the owning characteristic's type decides how it is read.
"""

from collections.abc import Mapping
from datetime import datetime
from typing import TYPE_CHECKING, Annotated, Any, Literal, Optional, Union

from pydantic import (
    ConfigDict,
    Field,
    StrictBool,
    StrictStr,
    TypeAdapter,
    model_validator,
)
from pydantic import ValidationError as PydanticValidationError

from materia.domain.error import ShapeMismatchError, UnknownVariantError
from materia.domain.model.file import (
    FileReference,
    FileSnapshot,
    FileUpload,
    StoredFile,
)
from materia.domain.value import CharacteristicType, FileId, VariantGroup
from materia.domain.value.common import ValueObject

if TYPE_CHECKING:
    from materia.domain.model.characteristic import Characteristic


class ValueShape(ValueObject):
    """Base class for characteristic value shapes."""

    model_config = ConfigDict(extra="forbid")


class ScalarValue(ValueShape):
    """Text, link, email and numbers, all kept as strings."""

    kind: Literal["scalar"] = "scalar"
    value: StrictStr


class MultiTextEntry(ValueShape):
    """One titled paragraph of a multi-text value."""

    title: StrictStr
    text: StrictStr


class MultiTextValue(ValueShape):
    kind: Literal["multiText"] = "multiText"
    multi_text: list[MultiTextEntry] = Field(alias="multiText")


class ChoiceValue(ValueShape):
    """Selected options of a select, radio, checkbox or multi-select."""

    kind: Literal["choice"] = "choice"
    value: list[StrictStr]


class BooleanValue(ValueShape):
    kind: Literal["boolean"] = "boolean"
    value: StrictBool


class DateValue(ValueShape):
    kind: Literal["date"] = "date"
    date: datetime


class DateRangeValue(ValueShape):
    kind: Literal["dateRange"] = "dateRange"
    from_: datetime = Field(alias="from")
    to: datetime

    @model_validator(mode="after")
    def validate_bounds(self) -> "DateRangeValue":
        if self.to < self.from_:
            raise ValueError("Date range must not end before it starts")
        return self


class FileValue(ValueShape):
    """Attached files plus the client's pending additions and deletions."""

    kind: Literal["file"] = "file"
    files: list[FileReference] = Field(default_factory=list, alias="file")
    file_to_add: list[FileUpload] = Field(default_factory=list, alias="fileToAdd")
    file_to_delete: list[FileId] = Field(default_factory=list, alias="fileToDelete")


class HistoricalFileValue(ValueShape):
    kind: Literal["file"] = "file"
    files: list[FileSnapshot] = Field(default_factory=list, alias="file")


LiveValue = Annotated[
    Union[
        ScalarValue,
        MultiTextValue,
        ChoiceValue,
        BooleanValue,
        DateValue,
        DateRangeValue,
        FileValue,
    ],
    Field(discriminator="kind"),
]

HistoricalValue = Annotated[
    Union[
        ScalarValue,
        MultiTextValue,
        ChoiceValue,
        BooleanValue,
        DateValue,
        DateRangeValue,
        HistoricalFileValue,
    ],
    Field(discriminator="kind"),
]

live_value_adapter = TypeAdapter(LiveValue)
historical_value_adapter = TypeAdapter(HistoricalValue)


_GROUP_BY_TYPE: dict[CharacteristicType, VariantGroup] = {
    CharacteristicType.TEXT: VariantGroup.SCALAR,
    CharacteristicType.TEXTAREA: VariantGroup.SCALAR,
    CharacteristicType.LINK: VariantGroup.SCALAR,
    CharacteristicType.EMAIL: VariantGroup.SCALAR,
    CharacteristicType.NUMBER: VariantGroup.SCALAR,
    CharacteristicType.FLOAT: VariantGroup.SCALAR,
    CharacteristicType.MULTI_TEXT: VariantGroup.MULTI_TEXT,
    CharacteristicType.MULTI_TEXT_AREA: VariantGroup.MULTI_TEXT,
    CharacteristicType.MULTI_SELECT: VariantGroup.CHOICE,
    CharacteristicType.SELECT: VariantGroup.CHOICE,
    CharacteristicType.CHECKBOX: VariantGroup.CHOICE,
    CharacteristicType.RADIO: VariantGroup.CHOICE,
    CharacteristicType.BOOLEAN: VariantGroup.BOOLEAN,
    CharacteristicType.DATE: VariantGroup.DATE,
    CharacteristicType.DATE_HOUR: VariantGroup.DATE,
    CharacteristicType.DATE_RANGE: VariantGroup.DATE_RANGE,
    CharacteristicType.DATE_HOUR_RANGE: VariantGroup.DATE_RANGE,
    CharacteristicType.FILE: VariantGroup.FILE,
}

_LIVE_SHAPES: dict[VariantGroup, type[ValueShape]] = {
    VariantGroup.SCALAR: ScalarValue,
    VariantGroup.MULTI_TEXT: MultiTextValue,
    VariantGroup.CHOICE: ChoiceValue,
    VariantGroup.BOOLEAN: BooleanValue,
    VariantGroup.DATE: DateValue,
    VariantGroup.DATE_RANGE: DateRangeValue,
    VariantGroup.FILE: FileValue,
}

# Both tables must cover their enumeration completely
_unmapped = (set(CharacteristicType) - set(_GROUP_BY_TYPE)) | (
    set(VariantGroup) - set(_LIVE_SHAPES)
)
if _unmapped:
    raise RuntimeError(f"Characteristic type model is not exhaustive: {_unmapped}")


def classify(characteristic_type: CharacteristicType | str) -> VariantGroup:
    """Map a characteristic type to its variant group.

    Args:
        characteristic_type: Enumeration member or its string value

    Returns:
        The variant group of the type

    Raises:
        UnknownVariantError: If the type is outside the closed enumeration
    """
    try:
        return _GROUP_BY_TYPE[CharacteristicType(characteristic_type)]
    except ValueError as e:
        raise UnknownVariantError(characteristic_type) from e


def validate_live_value(
    characteristic_type: CharacteristicType | str, value: Any
) -> LiveValue:
    """Check that a value has the live shape required by a characteristic type.

    Args:
        characteristic_type: Type of the owning characteristic
        value: A value shape instance, or the value's natural JSON shape

    Returns:
        The value as a typed live shape

    Raises:
        UnknownVariantError: If the type is unknown
        ShapeMismatchError: If the value belongs to another group or is malformed
    """
    group = classify(characteristic_type)
    shape = _LIVE_SHAPES[group]

    if isinstance(value, ValueShape):
        if not isinstance(value, shape):
            raise ShapeMismatchError(
                f"{type(value).__name__} does not match {group.value} "
                f"characteristic type {CharacteristicType(characteristic_type).value}"
            )
        return value

    try:
        return shape.model_validate(_wrap_raw(group, value))
    except PydanticValidationError as e:
        raise ShapeMismatchError(
            f"Invalid value for {CharacteristicType(characteristic_type).value} "
            f"characteristic: {e.errors(include_url=False)}"
        ) from e


def _wrap_raw(group: VariantGroup, raw: Any) -> dict[str, Any]:
    """Lift a natural JSON value into the field layout of its shape."""
    if isinstance(raw, Mapping):
        return dict(raw)
    if group is VariantGroup.MULTI_TEXT:
        return {"multiText": raw}
    if group is VariantGroup.FILE:
        return {"file": raw}
    return {"value": raw}


def to_historical(
    characteristic_type: CharacteristicType | str,
    live_value: LiveValue,
    resolved_files: Optional[Mapping[FileId, StoredFile]] = None,
) -> HistoricalValue:
    """Convert a live value into its historical form.

    Pure: file metadata must be resolved by the caller. Pending uploads and
    deletions are not part of history.

    Args:
        characteristic_type: Type of the owning characteristic
        live_value: Live value to convert
        resolved_files: Stored files keyed by id, required for file values

    Returns:
        Historical value

    Raises:
        ShapeMismatchError: If the value does not match the type, or a file
            reference has no resolved metadata
    """
    value = validate_live_value(characteristic_type, live_value)
    if not isinstance(value, FileValue):
        return value

    files = resolved_files or {}
    snapshots = []
    for reference in value.files:
        stored = files.get(reference.id)
        if stored is None:
            raise ShapeMismatchError(f"File {reference.id} has no stored metadata")
        snapshots.append(
            FileSnapshot(type=stored.type, name=stored.name, path=stored.path)
        )
    return HistoricalFileValue(files=snapshots)


class CharacteristicSnapshot(ValueObject):
    """Characteristic and its value as copied into a history snapshot."""

    name: str
    type: CharacteristicType
    units: Optional[str] = None
    value: HistoricalValue

    @model_validator(mode="after")
    def validate_value_kind(self) -> "CharacteristicSnapshot":
        group = classify(self.type)
        if self.value.kind != group.value:
            raise ValueError(
                f"{self.value.kind} value does not match {self.type.value} characteristic"
            )
        return self


def snapshot_characteristic(
    characteristic: "Characteristic",
    live_value: LiveValue,
    resolved_files: Optional[Mapping[FileId, StoredFile]] = None,
) -> CharacteristicSnapshot:
    """Copy a characteristic and its value by value for a history snapshot.

    Units are only kept for numeric characteristics.
    """
    return CharacteristicSnapshot(
        name=characteristic.name,
        type=characteristic.type,
        units=characteristic.units if characteristic.type.is_numeric else None,
        value=to_historical(characteristic.type, live_value, resolved_files),
    )
