"""Unit tests for ListLogsUseCase."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from materia.application.usecase.log.list_logs import ListLogsRequest, ListLogsUseCase
from materia.domain.error import MissingPermissionError
from materia.domain.model.log import LogEntry
from materia.domain.value import EntityId, LogId, LogType, PermissionCode
from materia.persistence.repository.inmemory import InMemoryStore
from tests.factories import make_actor, open_session
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


def log_entry(entity_id, action_date, name="Fragile"):
    return LogEntry(
        id=LogId(uuid4()),
        type=LogType.TAG_CREATE,
        info={"tag": {"id": str(uuid4()), "name": name}},
        entity_id=entity_id,
        action_date=action_date,
    )


class TestListLogsUseCase:
    """Tests for ListLogsUseCase."""

    @pytest.mark.asyncio
    async def test_defaults_to_last_week(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListLogsUseCase)
        store = await unit_env.get(InMemoryStore)
        actor = make_actor(permissions={PermissionCode.LOG_READ})
        token = open_session(store, actor)
        now = datetime.now()
        store.logs.extend(
            [
                log_entry(actor.entity_id, now - timedelta(days=1), "Recent"),
                log_entry(actor.entity_id, now - timedelta(days=30), "Old"),
                log_entry(EntityId(uuid4()), now - timedelta(days=1), "Foreign"),
            ]
        )

        # Act
        response = await use_case.execute(ListLogsRequest(session_token=token))

        # Assert
        assert [entry.info["tag"]["name"] for entry in response.logs] == ["Recent"]
        assert response.logs[0].entity_id == str(actor.entity_id)

    @pytest.mark.asyncio
    async def test_explicit_range(self, unit_env):
        use_case = await unit_env.get(ListLogsUseCase)
        store = await unit_env.get(InMemoryStore)
        actor = make_actor()
        token = open_session(store, actor)
        now = datetime.now()
        store.logs.append(log_entry(actor.entity_id, now - timedelta(days=30), "Old"))

        response = await use_case.execute(
            ListLogsRequest(session_token=token, start_date=now - timedelta(days=60))
        )

        assert len(response.logs) == 1

    @pytest.mark.asyncio
    async def test_requires_log_read(self, unit_env):
        use_case = await unit_env.get(ListLogsUseCase)
        store = await unit_env.get(InMemoryStore)
        token = open_session(store, make_actor(permissions={PermissionCode.TAG_READ}))

        with pytest.raises(MissingPermissionError):
            await use_case.execute(ListLogsRequest(session_token=token))
