"""Fixtures for end-to-end API tests."""

import pytest
from fastapi.testclient import TestClient

from materia.interface.api.app import create_app
from tests.factories import make_actor, open_session
from tests.di import build_test_container


@pytest.fixture
def actor(entity_id):
    """Actor holding every permission in the test entity."""
    return make_actor(entity_id)


@pytest.fixture
def app(store):
    """Application wired to mocked providers over the ``store`` fixture."""
    return create_app(container=build_test_container(store=store))


@pytest.fixture
def client(app, store, actor):
    """Logged-in test client.

    Leaving the client runs the app shutdown, which waits for pending
    history snapshots.
    """
    with TestClient(app) as test_client:
        test_client.cookies.set("session_token", open_session(store, actor))
        yield test_client
