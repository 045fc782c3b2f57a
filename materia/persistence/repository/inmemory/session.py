"""In-memory implementation of Session repository for testing."""

from datetime import datetime
from typing import Optional

from materia.domain.model.actor import Actor
from materia.domain.repository import SessionRepository

from .store import InMemoryStore


class InMemorySessionRepository(SessionRepository):
    """In-memory implementation of SessionRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_actor(self, session_token: str) -> Optional[Actor]:
        """Resolve the actor behind a non-expired session."""
        actor = self._store.sessions.get(session_token)
        if not actor:
            return None
        if actor.session_expires_at and actor.session_expires_at <= datetime.now():
            return None
        return actor
