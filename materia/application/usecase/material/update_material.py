"""Update material use case."""

from typing import Any, Optional

import logfire
from pydantic import BaseModel

from materia.domain.model.material import MaterialData
from materia.domain.service import MaterialService, PermissionGuard, TagService
from materia.domain.value import MaterialId, PermissionCode

from ..base import BaseUseCase, parse_id
from .items import MaterialItem


class UpdateMaterialRequest(BaseModel):
    """Update material request."""

    session_token: Optional[str] = None
    material_id: str
    payload: Any = None


class UpdateMaterialUseCase(BaseUseCase):
    """Use case for replacing the data of a material."""

    def __init__(
        self,
        guard: PermissionGuard,
        material_service: MaterialService,
        tag_service: TagService,
    ) -> None:
        self.guard = guard
        self.material_service = material_service
        self.tag_service = tag_service

    async def execute(self, request: UpdateMaterialRequest) -> MaterialItem:
        """Execute update material flow.

        Raises:
            NoActiveSessionError: If the session is missing or expired
            MissingPermissionError: If the caller lacks material_edit
            pydantic.ValidationError: If the data is invalid
            NotFoundMaterialError: If the material is not in the entity
        """
        with logfire.span("update_material.execute", material_id=request.material_id):
            actor = await self.guard.verify(
                request.session_token, PermissionCode.MATERIAL_EDIT
            )
            material_id = MaterialId(parse_id(request.material_id))
            data = MaterialData.model_validate(request.payload)

            material = await self.material_service.update_material(
                material_id, actor.entity_id, data, actor.user_id
            )
            tags = {tag.id: tag for tag in await self.tag_service.list_tags(actor.entity_id)}
            return MaterialItem.from_domain(material, tags)
