"""Create tag use case."""

from typing import Any, Optional

import logfire
from pydantic import BaseModel

from materia.domain.model.tag import TagData
from materia.domain.service import PermissionGuard, TagService
from materia.domain.value import PermissionCode

from ..base import BaseUseCase
from .items import TagItem


class CreateTagRequest(BaseModel):
    """Create tag request."""

    session_token: Optional[str] = None
    payload: Any = None


class CreateTagUseCase(BaseUseCase):
    """Use case for creating a tag."""

    def __init__(self, guard: PermissionGuard, tag_service: TagService) -> None:
        self.guard = guard
        self.tag_service = tag_service

    async def execute(self, request: CreateTagRequest) -> TagItem:
        """Execute create tag flow.

        Raises:
            NoActiveSessionError: If the session is missing or expired
            MissingPermissionError: If the caller lacks tag_create
            pydantic.ValidationError: If the data is invalid
        """
        with logfire.span("create_tag.execute"):
            actor = await self.guard.verify(request.session_token, PermissionCode.TAG_CREATE)
            data = TagData.model_validate(request.payload)

            tag = await self.tag_service.create_tag(actor.entity_id, data, actor.user_id)
            return TagItem.from_domain(tag)
