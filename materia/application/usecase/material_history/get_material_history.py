"""Get material history use case."""

from datetime import datetime
from typing import Optional

import logfire
from pydantic import BaseModel

from materia.domain.service import MaterialHistoryService, PermissionGuard
from materia.domain.value import MaterialId

from ..base import BaseUseCase, parse_id
from .items import MaterialHistoryItem


class GetMaterialHistoryRequest(BaseModel):
    """Get material history request."""

    session_token: Optional[str] = None
    material_id: str
    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None


class GetMaterialHistoryResponse(BaseModel):
    """Get material history response."""

    history: list[MaterialHistoryItem]


class GetMaterialHistoryUseCase(BaseUseCase):
    """Use case for reading the snapshots of a material in a date range."""

    def __init__(
        self, guard: PermissionGuard, material_history_service: MaterialHistoryService
    ) -> None:
        """Initialize get material history use case.

        Args:
            guard: Permission guard
            material_history_service: Material history domain service
        """
        self.guard = guard
        self.material_history_service = material_history_service

    async def execute(self, request: GetMaterialHistoryRequest) -> GetMaterialHistoryResponse:
        """Execute get material history flow.

        Args:
            request: Material and optional inclusive date bounds

        Returns:
            Snapshots, newest first

        Raises:
            NotFoundMaterialError: If the material is not in the entity
        """
        with logfire.span("get_material_history.execute", material_id=request.material_id):
            actor = await self.guard.verify(request.session_token)
            material_id = MaterialId(parse_id(request.material_id))

            history = await self.material_history_service.get_material_history(
                material_id, actor.entity_id, request.date_from, request.date_to
            )
            return GetMaterialHistoryResponse(
                history=[MaterialHistoryItem.from_domain(h) for h in history]
            )
