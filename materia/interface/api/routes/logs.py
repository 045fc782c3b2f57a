"""Audit log routes."""

from datetime import datetime
from typing import Optional

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends

from materia.application.usecase.log import (
    ListLogsRequest,
    ListLogsResponse,
    ListLogsUseCase,
)
from materia.interface.api.session import get_session_token

router = APIRouter(prefix="/logs", tags=["logs"], route_class=DishkaRoute)


@router.get("", response_model=ListLogsResponse)
async def list_logs(
    use_case: FromDishka[ListLogsUseCase],
    start_date: Optional[datetime] = None,
    end_date: Optional[datetime] = None,
    session_token: Optional[str] = Depends(get_session_token),
) -> ListLogsResponse:
    """Audit trail of the caller's entity.

    Defaults to the last seven days. Requires ``log_read``.

    Example:
        GET /logs?start_date=2024-01-01T00:00:00&end_date=2024-01-31T23:59:59
    """
    with logfire.span("api.list_logs"):
        request = ListLogsRequest(
            session_token=session_token, start_date=start_date, end_date=end_date
        )
        return await use_case.execute(request)
