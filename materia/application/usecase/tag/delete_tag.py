"""Delete tag use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from materia.domain.service import PermissionGuard, TagService
from materia.domain.value import PermissionCode, TagId

from ..base import BaseUseCase, parse_id
from .items import TagItem


class DeleteTagRequest(BaseModel):
    """Delete tag request."""

    session_token: Optional[str] = None
    tag_id: str


class DeleteTagUseCase(BaseUseCase):
    """Use case for deleting a tag no material carries."""

    def __init__(self, guard: PermissionGuard, tag_service: TagService) -> None:
        self.guard = guard
        self.tag_service = tag_service

    async def execute(self, request: DeleteTagRequest) -> TagItem:
        """Execute delete tag flow. Deleting requires the create permission."""
        with logfire.span("delete_tag.execute", tag_id=request.tag_id):
            actor = await self.guard.verify(request.session_token, PermissionCode.TAG_CREATE)
            tag_id = TagId(parse_id(request.tag_id))

            tag = await self.tag_service.delete_tag(tag_id, actor.entity_id, actor.user_id)
            return TagItem.from_domain(tag)
