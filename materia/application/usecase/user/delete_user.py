"""Delete user use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from materia.domain.service import PermissionGuard, UserService
from materia.domain.value import PermissionCode, UserId

from ..base import BaseUseCase, parse_id
from .items import UserItem


class DeleteUserRequest(BaseModel):
    """Delete user request."""

    session_token: Optional[str] = None
    user_id: str


class DeleteUserUseCase(BaseUseCase):
    """Use case for soft deleting a user."""

    def __init__(self, guard: PermissionGuard, user_service: UserService) -> None:
        self.guard = guard
        self.user_service = user_service

    async def execute(self, request: DeleteUserRequest) -> UserItem:
        """Execute delete user flow. Deleting requires the create permission."""
        with logfire.span("delete_user.execute", user_id=request.user_id):
            actor = await self.guard.verify(request.session_token, PermissionCode.USER_CREATE)
            user_id = UserId(parse_id(request.user_id))

            user = await self.user_service.delete_user(user_id, actor.user_id)
            return UserItem.from_domain(user)
