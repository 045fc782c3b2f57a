"""Unit tests for characteristic value shapes."""

from datetime import datetime
from uuid import uuid4

import pytest

from materia.domain.error import ShapeMismatchError, UnknownVariantError
from materia.domain.model.characteristic_value import (
    BooleanValue,
    ChoiceValue,
    DateRangeValue,
    DateValue,
    FileValue,
    HistoricalFileValue,
    MultiTextValue,
    ScalarValue,
    classify,
    historical_value_adapter,
    live_value_adapter,
    snapshot_characteristic,
    to_historical,
    validate_live_value,
)
from materia.domain.model.file import FileReference, StoredFile
from materia.domain.value import CharacteristicType, EntityId, FileId, VariantGroup
from tests.factories import make_characteristic


class TestClassify:
    """Tests for classify."""

    def test_every_type_has_a_group(self):
        """Every characteristic type maps to exactly one group."""
        groups = {t: classify(t) for t in CharacteristicType}

        assert len(groups) == len(CharacteristicType)
        assert all(isinstance(g, VariantGroup) for g in groups.values())

    @pytest.mark.parametrize(
        ("characteristic_type", "group"),
        [
            ("text", VariantGroup.SCALAR),
            ("email", VariantGroup.SCALAR),
            ("float", VariantGroup.SCALAR),
            ("multiTextArea", VariantGroup.MULTI_TEXT),
            ("radio", VariantGroup.CHOICE),
            ("checkbox", VariantGroup.CHOICE),
            ("boolean", VariantGroup.BOOLEAN),
            ("dateHour", VariantGroup.DATE),
            ("dateHourRange", VariantGroup.DATE_RANGE),
            ("file", VariantGroup.FILE),
        ],
    )
    def test_accepts_string_values(self, characteristic_type, group):
        assert classify(characteristic_type) is group

    def test_unknown_type_raises(self):
        with pytest.raises(UnknownVariantError) as exc_info:
            classify("colour")

        assert exc_info.value.code == "unknownCharacteristicType"


class TestValidateLiveValue:
    """Tests for validate_live_value."""

    def test_scalar_from_natural_json(self):
        value = validate_live_value(CharacteristicType.NUMBER, "12")

        assert value == ScalarValue(value="12")

    def test_choice_from_list(self):
        value = validate_live_value(CharacteristicType.MULTI_SELECT, ["a", "b"])

        assert isinstance(value, ChoiceValue)
        assert value.value == ["a", "b"]

    def test_boolean_rejects_strings(self):
        with pytest.raises(ShapeMismatchError):
            validate_live_value(CharacteristicType.BOOLEAN, "true")

    def test_date_from_mapping(self):
        value = validate_live_value(CharacteristicType.DATE, {"date": "2024-05-01T10:00:00"})

        assert value == DateValue(date=datetime(2024, 5, 1, 10))

    def test_date_range_rejects_inverted_bounds(self):
        with pytest.raises(ShapeMismatchError):
            validate_live_value(
                CharacteristicType.DATE_RANGE,
                {"from": "2024-05-02T00:00:00", "to": "2024-05-01T00:00:00"},
            )

    def test_multi_text_from_list(self):
        value = validate_live_value(
            CharacteristicType.MULTI_TEXT, [{"title": "Origin", "text": "France"}]
        )

        assert isinstance(value, MultiTextValue)
        assert value.multi_text[0].title == "Origin"

    def test_shape_of_other_group_is_rejected(self):
        """A typed shape must belong to the characteristic's group."""
        with pytest.raises(ShapeMismatchError) as exc_info:
            validate_live_value(CharacteristicType.TEXT, BooleanValue(value=True))

        assert exc_info.value.code == "characteristicValueMismatch"

    def test_unknown_type_raises(self):
        with pytest.raises(UnknownVariantError):
            validate_live_value("colour", "red")

    def test_discriminated_json_round_trip(self):
        """Persisted values carry their kind and parse back to the same shape."""
        value = DateRangeValue(
            from_=datetime(2024, 1, 1), to=datetime(2024, 2, 1)
        )

        dumped = value.model_dump(mode="json", by_alias=True)

        assert dumped["kind"] == "dateRange"
        assert live_value_adapter.validate_python(dumped) == value


class TestToHistorical:
    """Tests for to_historical."""

    def test_non_file_values_are_unchanged(self):
        value = ScalarValue(value="3.5")

        assert to_historical(CharacteristicType.FLOAT, value) == value

    def test_file_references_are_resolved(self):
        file_id = FileId(uuid4())
        value = FileValue(files=[FileReference(id=file_id, name="datasheet.pdf", type="application/pdf")])
        stored = StoredFile(
            id=file_id,
            entity_id=EntityId(uuid4()),
            name="datasheet.pdf",
            type="application/pdf",
            path="materials/x/datasheet.pdf",
        )

        historical = to_historical(CharacteristicType.FILE, value, {file_id: stored})

        assert isinstance(historical, HistoricalFileValue)
        assert historical.files[0].path == "materials/x/datasheet.pdf"

    def test_is_deterministic(self):
        file_id = FileId(uuid4())
        value = FileValue(files=[FileReference(id=file_id, name="a.png", type="image/png")])
        resolved = {
            file_id: StoredFile(
                id=file_id,
                entity_id=EntityId(uuid4()),
                name="a.png",
                type="image/png",
                path="p/a.png",
            )
        }

        first = to_historical(CharacteristicType.FILE, value, resolved)
        second = to_historical(CharacteristicType.FILE, value, resolved)

        assert first == second
        assert historical_value_adapter.validate_python(
            first.model_dump(by_alias=True)
        ) == first

    def test_unresolved_file_raises(self):
        value = FileValue(files=[FileReference(id=FileId(uuid4()), name="a", type="b")])

        with pytest.raises(ShapeMismatchError):
            to_historical(CharacteristicType.FILE, value, {})


class TestSnapshotCharacteristic:
    """Tests for snapshot_characteristic."""

    def test_numeric_keeps_units(self):
        characteristic = make_characteristic(EntityId(uuid4()), units="kg")

        snapshot = snapshot_characteristic(characteristic, ScalarValue(value="12"))

        assert snapshot.name == "Weight"
        assert snapshot.units == "kg"

    def test_non_numeric_drops_units(self):
        characteristic = make_characteristic(
            EntityId(uuid4()), name="Notes", type=CharacteristicType.TEXT, units="kg"
        )

        snapshot = snapshot_characteristic(characteristic, ScalarValue(value="dry"))

        assert snapshot.units is None
