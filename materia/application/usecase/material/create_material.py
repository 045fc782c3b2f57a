"""Create material use case."""

from typing import Any, Optional

import logfire
from pydantic import BaseModel

from materia.domain.model.material import MaterialData
from materia.domain.service import MaterialService, PermissionGuard, TagService
from materia.domain.value import PermissionCode

from ..base import BaseUseCase
from .items import MaterialItem


class CreateMaterialRequest(BaseModel):
    """Create material request."""

    session_token: Optional[str] = None
    payload: Any = None


class CreateMaterialUseCase(BaseUseCase):
    """Use case for creating a material with its tags and values."""

    def __init__(
        self,
        guard: PermissionGuard,
        material_service: MaterialService,
        tag_service: TagService,
    ) -> None:
        self.guard = guard
        self.material_service = material_service
        self.tag_service = tag_service

    async def execute(self, request: CreateMaterialRequest) -> MaterialItem:
        """Execute create material flow.

        Raises:
            NoActiveSessionError: If the session is missing or expired
            MissingPermissionError: If the caller lacks material_create
            pydantic.ValidationError: If the data is invalid
            NotFoundTagError: If a tag is not in the entity
            NotFoundCharacteristicError: If a characteristic is not in the entity
            ShapeMismatchError: If a value does not match its characteristic
        """
        with logfire.span("create_material.execute"):
            actor = await self.guard.verify(
                request.session_token, PermissionCode.MATERIAL_CREATE
            )
            data = MaterialData.model_validate(request.payload)

            material = await self.material_service.create_material(
                actor.entity_id, data, actor.user_id
            )
            tags = {tag.id: tag for tag in await self.tag_service.list_tags(actor.entity_id)}
            return MaterialItem.from_domain(material, tags)
