"""Test configuration and fixtures."""

from uuid import uuid4

import logfire
import pytest
import pytest_asyncio

from materia.domain.value import EntityId
from materia.persistence.repository.inmemory import InMemoryStore
from tests.di import build_test_container

# Spans and events stay local during tests
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def store() -> InMemoryStore:
    """Empty in-memory tables."""
    return InMemoryStore()


@pytest.fixture
def entity_id() -> EntityId:
    return EntityId(uuid4())


@pytest_asyncio.fixture
async def container(store):
    """Root test container over the ``store`` fixture.

    Use ``async with container() as request:`` to run one unit of work;
    requested history snapshots are scheduled when it exits.
    """
    test_container = build_test_container(store=store)
    yield test_container
    await test_container.close()
