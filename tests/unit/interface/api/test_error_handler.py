"""Unit tests for error to response mapping."""

import pytest
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from materia.adapter.error import FileStorageError
from materia.domain.error import (
    DeleteRoleUserAssignedError,
    DeleteTagUsedByMaterialsError,
    MissingPermissionError,
    NoActiveSessionError,
    NotFoundMaterialError,
    NotFoundRoleError,
    ProtectedRoleError,
    ShapeMismatchError,
    StorageError,
    UnknownVariantError,
)
from materia.interface.api.error import GENERIC_ERROR_MESSAGE, public_detail, status_for


class Payload(BaseModel):
    name: str


def pydantic_error() -> PydanticValidationError:
    try:
        Payload.model_validate({"name": 42})
    except PydanticValidationError as e:
        return e
    raise AssertionError("validation should have failed")


class TestStatusFor:
    """Tests for status code mapping."""

    @pytest.mark.parametrize(
        "exc, expected",
        [
            (NotFoundMaterialError("m"), 404),
            (NotFoundRoleError("r"), 404),
            (DeleteTagUsedByMaterialsError("in use"), 409),
            (ProtectedRoleError("protected"), 409),
            (ShapeMismatchError("bad value"), 422),
            (UnknownVariantError("colour"), 422),
            (NoActiveSessionError("no session"), 401),
            (MissingPermissionError("tag_create"), 403),
            (StorageError("db down"), 500),
            (FileStorageError("disk full"), 500),
            (RuntimeError("boom"), 500),
        ],
    )
    def test_status(self, exc, expected):
        assert status_for(exc) == expected

    def test_pydantic_validation_error(self):
        assert status_for(pydantic_error()) == 422


class TestPublicDetail:
    """Only allow-listed codes reach the caller."""

    @pytest.mark.parametrize(
        "exc, expected",
        [
            (DeleteTagUsedByMaterialsError("in use"), "tagHasMaterials"),
            (DeleteRoleUserAssignedError("held"), "roleHasUsers"),
            (NotFoundMaterialError("m"), "materialNotFound"),
            (MissingPermissionError("tag_create"), "missingPermission"),
            (ShapeMismatchError("bad value"), "characteristicValueMismatch"),
            (UnknownVariantError("colour"), "unknownCharacteristicType"),
        ],
    )
    def test_exposed_codes(self, exc, expected):
        assert public_detail(exc) == expected

    @pytest.mark.parametrize(
        "exc",
        [
            NotFoundRoleError("r"),
            ProtectedRoleError("protected"),
            NoActiveSessionError("no session"),
            StorageError("password=hunter2"),
            RuntimeError("stack trace"),
        ],
    )
    def test_other_errors_are_generic(self, exc):
        assert public_detail(exc) == GENERIC_ERROR_MESSAGE

    def test_validation_errors_list_fields_without_input(self):
        detail = public_detail(pydantic_error())

        assert detail[0]["loc"] == ("name",)
        assert "input" not in detail[0]
        assert "url" not in detail[0]
