"""Audit log repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime

from materia.domain.model.log import LogEntry
from materia.domain.value import EntityId


class LogRepository(ABC):
    """Repository interface for audit log entries."""

    @abstractmethod
    async def append(self, entry: LogEntry) -> LogEntry:
        """Append an entry.

        Args:
            entry: Entry to store

        Returns:
            Stored entry
        """
        pass

    @abstractmethod
    async def find_in_range(
        self, entity_ids: list[EntityId], start: datetime, end: datetime
    ) -> list[LogEntry]:
        """Find entries of entities, plus entity-less ones, newest first.

        Args:
            entity_ids: Tenant scopes
            start: Inclusive lower bound on action date
            end: Inclusive upper bound on action date

        Returns:
            Matching entries
        """
        pass
