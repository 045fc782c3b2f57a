"""Unit tests for characteristic definitions."""

import pytest
from pydantic import ValidationError

from materia.domain.model.characteristic import (
    CharacteristicChanges,
    NewCharacteristic,
    merge_options,
)
from materia.domain.value import CharacteristicType


class TestNewCharacteristic:
    """Tests for NewCharacteristic validation."""

    @pytest.mark.parametrize("length", [2, 64])
    def test_name_length_accepted(self, length):
        data = NewCharacteristic(name="x" * length, type=CharacteristicType.TEXT)

        assert len(data.name) == length

    @pytest.mark.parametrize("length", [1, 65])
    def test_name_length_rejected(self, length):
        with pytest.raises(ValidationError):
            NewCharacteristic(name="x" * length, type=CharacteristicType.TEXT)

    def test_name_is_trimmed_before_length_check(self):
        with pytest.raises(ValidationError):
            NewCharacteristic(name="  a  ", type=CharacteristicType.TEXT)

    def test_choice_type_requires_options(self):
        with pytest.raises(ValidationError):
            NewCharacteristic(name="Finish", type=CharacteristicType.SELECT)

    def test_non_choice_type_rejects_options(self):
        with pytest.raises(ValidationError):
            NewCharacteristic(name="Weight", type=CharacteristicType.NUMBER, options=["a"])

    def test_unknown_type_rejected(self):
        with pytest.raises(ValidationError):
            NewCharacteristic.model_validate({"name": "Colour", "type": "colour"})

    def test_clean_options_drop_blanks_and_duplicates(self):
        data = NewCharacteristic(
            name="Finish",
            type=CharacteristicType.SELECT,
            options=["matte", " ", "gloss", "matte"],
        )

        assert data.clean_options == ["matte", "gloss"]


class TestCharacteristicChanges:
    """Tests for CharacteristicChanges."""

    def test_type_cannot_be_sent(self):
        with pytest.raises(ValidationError):
            CharacteristicChanges.model_validate({"name": "Weight", "type": "text"})


class TestMergeOptions:
    """Tests for merge_options."""

    def test_appends_new_options_only(self):
        assert merge_options(["matte"], ["gloss", "matte", ""]) == ["matte", "gloss"]

    def test_never_removes_existing(self):
        assert merge_options(["matte", "gloss"], []) == ["matte", "gloss"]
