"""Update tag use case."""

from typing import Any, Optional

import logfire
from pydantic import BaseModel

from materia.domain.model.tag import TagData
from materia.domain.service import PermissionGuard, TagService
from materia.domain.value import PermissionCode, TagId

from ..base import BaseUseCase, parse_id
from .items import TagItem


class UpdateTagRequest(BaseModel):
    """Update tag request."""

    session_token: Optional[str] = None
    tag_id: str
    payload: Any = None


class UpdateTagUseCase(BaseUseCase):
    """Use case for renaming or recolouring a tag."""

    def __init__(self, guard: PermissionGuard, tag_service: TagService) -> None:
        self.guard = guard
        self.tag_service = tag_service

    async def execute(self, request: UpdateTagRequest) -> TagItem:
        """Execute update tag flow.

        Raises:
            NoActiveSessionError: If the session is missing or expired
            MissingPermissionError: If the caller lacks tag_edit
            pydantic.ValidationError: If the data is invalid
            NotFoundTagError: If the tag is not in the entity
        """
        with logfire.span("update_tag.execute", tag_id=request.tag_id):
            actor = await self.guard.verify(request.session_token, PermissionCode.TAG_EDIT)
            tag_id = TagId(parse_id(request.tag_id))
            data = TagData.model_validate(request.payload)

            tag = await self.tag_service.update_tag(
                tag_id, actor.entity_id, data, actor.user_id
            )
            return TagItem.from_domain(tag)
