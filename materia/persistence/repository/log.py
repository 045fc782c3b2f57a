"""PostgreSQL implementation of Log repository."""

from datetime import datetime

import logfire
from sqlalchemy import insert, or_, select
from sqlalchemy.exc import SQLAlchemyError

from materia.domain.error import StorageError
from materia.domain.model.log import LogEntry
from materia.domain.repository import LogRepository
from materia.domain.value import EntityId
from materia.persistence.mappers import log_entry_to_dict, row_to_log_entry
from materia.persistence.repository.base import PostgresRepository
from materia.persistence.tables import logs_table


class PostgresLogRepository(PostgresRepository, LogRepository):
    """PostgreSQL implementation of LogRepository."""

    async def append(self, entry: LogEntry) -> LogEntry:
        """Insert an entry inside a savepoint.

        A failed insert only rolls back the savepoint, leaving the
        surrounding transaction usable.
        """
        try:
            async with self.session.begin_nested():
                await self.session.execute(
                    insert(logs_table).values(**log_entry_to_dict(entry))
                )
        except SQLAlchemyError as e:
            logfire.error("Log insert failed", log_type=entry.type.value, error=str(e))
            raise StorageError("PostgresLogRepository failed") from e
        return entry

    async def find_in_range(
        self, entity_ids: list[EntityId], start: datetime, end: datetime
    ) -> list[LogEntry]:
        """Find entries of entities and global entries, newest first."""
        stmt = (
            select(logs_table)
            .where(
                or_(
                    logs_table.c.entity_id.in_(entity_ids),
                    logs_table.c.entity_id.is_(None),
                ),
                logs_table.c.action_date >= start,
                logs_table.c.action_date <= end,
            )
            .order_by(logs_table.c.action_date.desc())
        )
        result = await self._execute(stmt)
        return [row_to_log_entry(row._asdict()) for row in result]
