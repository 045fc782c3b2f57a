"""Health check route."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from materia.config import Settings
from materia.domain.service import MaterialHistoryScheduler

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Liveness report. Needs no session."""

    status: str
    checked_at: datetime
    git_sha: str
    environment: str
    # Snapshots scheduled but not generated yet
    pending_history: int


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: FromDishka[Settings],
    scheduler: FromDishka[MaterialHistoryScheduler],
) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        checked_at=datetime.now(),
        git_sha=settings.git_sha,
        environment=settings.environment,
        pending_history=scheduler.pending,
    )
