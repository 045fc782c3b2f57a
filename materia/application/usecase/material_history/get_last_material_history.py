"""Get last material history use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from materia.domain.service import MaterialHistoryService, PermissionGuard
from materia.domain.value import MaterialId

from ..base import BaseUseCase, parse_id
from .items import MaterialHistoryItem


class GetLastMaterialHistoryRequest(BaseModel):
    """Get last material history request."""

    session_token: Optional[str] = None
    material_id: str


class GetLastMaterialHistoryResponse(BaseModel):
    """Latest snapshot, None when the material has none yet."""

    history: Optional[MaterialHistoryItem]


class GetLastMaterialHistoryUseCase(BaseUseCase):
    """Use case for reading the latest snapshot of a material."""

    def __init__(
        self, guard: PermissionGuard, material_history_service: MaterialHistoryService
    ) -> None:
        self.guard = guard
        self.material_history_service = material_history_service

    async def execute(
        self, request: GetLastMaterialHistoryRequest
    ) -> GetLastMaterialHistoryResponse:
        with logfire.span(
            "get_last_material_history.execute", material_id=request.material_id
        ):
            actor = await self.guard.verify(request.session_token)
            material_id = MaterialId(parse_id(request.material_id))

            history = await self.material_history_service.get_last_material_history(
                material_id, actor.entity_id
            )
            return GetLastMaterialHistoryResponse(
                history=MaterialHistoryItem.from_domain(history) if history else None
            )
