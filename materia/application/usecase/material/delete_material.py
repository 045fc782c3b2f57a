"""Delete material use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from materia.domain.service import MaterialService, PermissionGuard
from materia.domain.value import MaterialId, PermissionCode

from ..base import BaseUseCase, parse_id


class DeleteMaterialRequest(BaseModel):
    """Delete material request."""

    session_token: Optional[str] = None
    material_id: str


class DeleteMaterialResponse(BaseModel):
    """Delete material response."""

    id: str
    name: str


class DeleteMaterialUseCase(BaseUseCase):
    """Use case for soft deleting a material."""

    def __init__(self, guard: PermissionGuard, material_service: MaterialService) -> None:
        self.guard = guard
        self.material_service = material_service

    async def execute(self, request: DeleteMaterialRequest) -> DeleteMaterialResponse:
        """Execute delete material flow. Deleting requires the create permission."""
        with logfire.span("delete_material.execute", material_id=request.material_id):
            actor = await self.guard.verify(
                request.session_token, PermissionCode.MATERIAL_CREATE
            )
            material_id = MaterialId(parse_id(request.material_id))

            material = await self.material_service.delete_material(
                material_id, actor.entity_id, actor.user_id
            )
            return DeleteMaterialResponse(id=str(material.id), name=material.name)
