"""List materials use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from materia.domain.service import MaterialService, PermissionGuard, TagService

from ..base import BaseUseCase
from .items import MaterialItem


class ListMaterialsRequest(BaseModel):
    """List materials request."""

    session_token: Optional[str] = None


class ListMaterialsResponse(BaseModel):
    """List materials response."""

    materials: list[MaterialItem]


class ListMaterialsUseCase(BaseUseCase):
    """Use case for listing the active materials of the caller's entity."""

    def __init__(
        self,
        guard: PermissionGuard,
        material_service: MaterialService,
        tag_service: TagService,
    ) -> None:
        """Initialize list materials use case.

        Args:
            guard: Permission guard
            material_service: Material domain service
            tag_service: Tag domain service, resolves material tags
        """
        self.guard = guard
        self.material_service = material_service
        self.tag_service = tag_service

    async def execute(self, request: ListMaterialsRequest) -> ListMaterialsResponse:
        """Execute list materials flow.

        Returns:
            Active materials, most recently updated first, with their tags
        """
        with logfire.span("list_materials.execute"):
            actor = await self.guard.verify(request.session_token)
            materials = await self.material_service.list_materials(actor.entity_id)
            tags = {tag.id: tag for tag in await self.tag_service.list_tags(actor.entity_id)}

            return ListMaterialsResponse(
                materials=[MaterialItem.from_domain(m, tags) for m in materials]
            )
