"""Unit tests for CreateTagUseCase."""

import pytest
from pydantic import ValidationError

from materia.application.usecase.tag import CreateTagRequest, CreateTagUseCase
from materia.domain.error import MissingPermissionError, NoActiveSessionError
from materia.domain.value import PermissionCode
from materia.persistence.repository.inmemory import InMemoryStore
from tests.factories import make_actor, open_session
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateTagUseCase:
    """Tests for CreateTagUseCase."""

    @pytest.mark.asyncio
    async def test_create_tag_success(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateTagUseCase)
        store = await unit_env.get(InMemoryStore)
        actor = make_actor(permissions={PermissionCode.TAG_CREATE})
        token = open_session(store, actor)

        # Act
        item = await use_case.execute(
            CreateTagRequest(
                session_token=token,
                payload={"name": "Fragile", "color": "#ff0000", "fontColor": "#ffffff"},
            )
        )

        # Assert
        assert item.name == "Fragile"
        assert item.font_color == "#ffffff"
        [tag] = store.tags.values()
        assert tag.entity_id == actor.entity_id

    @pytest.mark.asyncio
    async def test_session_checked_before_payload(self, unit_env):
        """An anonymous caller gets no hint about what a valid payload is."""
        use_case = await unit_env.get(CreateTagUseCase)

        with pytest.raises(NoActiveSessionError):
            await use_case.execute(CreateTagRequest(payload={"name": 42}))

    @pytest.mark.asyncio
    async def test_permission_checked_before_payload(self, unit_env):
        use_case = await unit_env.get(CreateTagUseCase)
        store = await unit_env.get(InMemoryStore)
        token = open_session(store, make_actor(permissions={PermissionCode.TAG_READ}))

        with pytest.raises(MissingPermissionError):
            await use_case.execute(CreateTagRequest(session_token=token, payload=None))

        assert store.tags == {}

    @pytest.mark.asyncio
    async def test_invalid_payload(self, unit_env):
        use_case = await unit_env.get(CreateTagUseCase)
        store = await unit_env.get(InMemoryStore)
        token = open_session(store, make_actor())

        with pytest.raises(ValidationError):
            await use_case.execute(
                CreateTagRequest(
                    session_token=token,
                    payload={"name": "X", "color": "red", "fontColor": "#ffffff"},
                )
            )
