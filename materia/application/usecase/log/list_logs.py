"""List logs use case."""

from datetime import datetime, timedelta
from typing import Any, Optional

import logfire
from pydantic import BaseModel

from materia.domain.service import LogService, PermissionGuard
from materia.domain.value import LogType, PermissionCode

from ..base import BaseUseCase

# Window used when no start date is given
DEFAULT_LOG_WINDOW = timedelta(days=7)


class LogItem(BaseModel):
    """Audit log entry in responses."""

    id: str
    type: LogType
    info: dict[str, Any]
    user_id: Optional[str]
    entity_id: Optional[str]
    action_date: datetime


class ListLogsRequest(BaseModel):
    """List logs request."""

    session_token: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None


class ListLogsResponse(BaseModel):
    """List logs response."""

    logs: list[LogItem]


class ListLogsUseCase(BaseUseCase):
    """Use case for reading the audit trail."""

    def __init__(self, guard: PermissionGuard, log_service: LogService) -> None:
        """Initialize list logs use case.

        Args:
            guard: Permission guard
            log_service: Audit log domain service
        """
        self.guard = guard
        self.log_service = log_service

    async def execute(self, request: ListLogsRequest) -> ListLogsResponse:
        """Execute list logs flow.

        Args:
            request: Optional date bounds, defaulting to the last seven days

        Returns:
            Entries of the caller's entity plus global entries, newest first

        Raises:
            MissingPermissionError: If the caller lacks log_read
        """
        with logfire.span("list_logs.execute"):
            actor = await self.guard.verify(request.session_token, PermissionCode.LOG_READ)

            end = request.end_date or datetime.now()
            start = request.start_date or end - DEFAULT_LOG_WINDOW
            entries = await self.log_service.list_logs([actor.entity_id], start, end)

            return ListLogsResponse(
                logs=[
                    LogItem(
                        id=str(e.id),
                        type=e.type,
                        info=e.info,
                        user_id=str(e.user_id) if e.user_id else None,
                        entity_id=str(e.entity_id) if e.entity_id else None,
                        action_date=e.action_date,
                    )
                    for e in entries
                ]
            )
