"""Audit log domain service."""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

import logfire

from materia.domain.error import StorageError
from materia.domain.model.log import LogEntry
from materia.domain.repository import LogRepository
from materia.domain.value import EntityId, LogId, LogType, UserId

from .base import Service


class LogService(Service):
    """Domain service for the audit trail."""

    def __init__(self, log_repository: LogRepository) -> None:
        """Initialize log service.

        Args:
            log_repository: Log repository
        """
        self.log_repository = log_repository

    async def append(
        self,
        log_type: LogType,
        subject_id: UUID,
        subject_name: str,
        entity_id: Optional[EntityId] = None,
        user_id: Optional[UserId] = None,
    ) -> Optional[LogEntry]:
        """Record a mutation in the audit trail.

        Best effort: a storage failure is logged and the entry dropped, the
        mutation being audited is never failed because of it.

        Args:
            log_type: Kind of mutation
            subject_id: Identifier of the mutated record
            subject_name: Name of the mutated record
            entity_id: Tenant of the record, None for global records
            user_id: Actor that made the mutation

        Returns:
            Stored entry, None if it could not be written
        """
        entry = LogEntry(
            id=LogId(uuid4()),
            type=log_type,
            info={log_type.subject: {"id": str(subject_id), "name": subject_name}},
            user_id=user_id,
            entity_id=entity_id,
            action_date=datetime.now(),
        )
        try:
            saved = await self.log_repository.append(entry)
        except StorageError as e:
            logfire.error(
                "Audit log entry dropped",
                log_type=log_type.value,
                subject_id=str(subject_id),
                error=str(e),
            )
            return None

        logfire.info(
            "Audit log entry added", log_type=log_type.value, subject_id=str(subject_id)
        )
        return saved

    async def list_logs(
        self,
        entity_ids: list[EntityId],
        start: datetime,
        end: Optional[datetime] = None,
    ) -> list[LogEntry]:
        """List entries of some entities and global entries, newest first.

        Args:
            entity_ids: Tenants to include
            start: Inclusive lower bound on action date
            end: Inclusive upper bound on action date (defaults to now)

        Returns:
            Matching entries
        """
        end = end or datetime.now()
        with logfire.span(
            "log_service.list_logs",
            entity_count=len(entity_ids),
            start=start.isoformat(),
            end=end.isoformat(),
        ):
            entries = await self.log_repository.find_in_range(entity_ids, start, end)
            logfire.info("Logs retrieved", count=len(entries))
            return entries
