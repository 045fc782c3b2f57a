"""In-memory implementation of Log repository for testing."""

from copy import deepcopy
from datetime import datetime

from materia.domain.model.log import LogEntry
from materia.domain.repository import LogRepository
from materia.domain.value import EntityId

from .store import InMemoryStore


class InMemoryLogRepository(LogRepository):
    """In-memory implementation of LogRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def append(self, entry: LogEntry) -> LogEntry:
        """Append an entry."""
        self._store.logs.append(deepcopy(entry))
        return deepcopy(entry)

    async def find_in_range(
        self, entity_ids: list[EntityId], start: datetime, end: datetime
    ) -> list[LogEntry]:
        """Find entries of entities and global entries, newest first."""
        entries = [
            e
            for e in self._store.logs
            if (e.entity_id is None or e.entity_id in entity_ids)
            and start <= e.action_date <= end
        ]
        entries.sort(key=lambda e: e.action_date, reverse=True)
        return [deepcopy(e) for e in entries]
