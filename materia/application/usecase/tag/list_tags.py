"""List tags use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from materia.domain.service import PermissionGuard, TagService

from ..base import BaseUseCase
from .items import TagItem


class TagWithCountItem(TagItem):
    """Tag with the number of active materials carrying it."""

    material_count: int


class ListTagsRequest(BaseModel):
    """List tags request."""

    session_token: Optional[str] = None


class ListTagsResponse(BaseModel):
    """List tags response."""

    tags: list[TagWithCountItem]


class ListTagsUseCase(BaseUseCase):
    """Use case for listing the tags of the caller's entity."""

    def __init__(self, guard: PermissionGuard, tag_service: TagService) -> None:
        """Initialize list tags use case.

        Args:
            guard: Permission guard
            tag_service: Tag domain service
        """
        self.guard = guard
        self.tag_service = tag_service

    async def execute(self, request: ListTagsRequest) -> ListTagsResponse:
        """Execute list tags flow.

        Args:
            request: List tags request

        Returns:
            Tags sorted by name
        """
        with logfire.span("list_tags.execute"):
            actor = await self.guard.verify(request.session_token)
            tags = await self.tag_service.list_tags(actor.entity_id)

            tag_items = [
                TagWithCountItem(
                    **TagItem.from_domain(tag).model_dump(),
                    material_count=tag.material_count,
                )
                for tag in tags
            ]

            logfire.info("Tags listed", count=len(tag_items))
            return ListTagsResponse(tags=tag_items)
