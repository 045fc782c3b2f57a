"""Change selected entity use case."""

from typing import Any, Optional

import logfire
from pydantic import BaseModel

from materia.domain.model.user import EntitySelection
from materia.domain.service import PermissionGuard, UserService

from ..base import BaseUseCase
from .items import UserItem


class ChangeSelectedEntityRequest(BaseModel):
    """Change selected entity request."""

    session_token: Optional[str] = None
    payload: Any = None


class ChangeSelectedEntityUseCase(BaseUseCase):
    """Use case for switching the entity the caller works in.

    Only a session is needed: callers always act on their own account.
    """

    def __init__(self, guard: PermissionGuard, user_service: UserService) -> None:
        self.guard = guard
        self.user_service = user_service

    async def execute(self, request: ChangeSelectedEntityRequest) -> UserItem:
        with logfire.span("change_selected_entity.execute"):
            actor = await self.guard.verify(request.session_token)
            selection = EntitySelection.model_validate(request.payload)

            user = await self.user_service.change_selected_entity(
                actor.user_id, selection.entity_id
            )
            return UserItem.from_domain(user)
