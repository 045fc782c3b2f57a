"""Update user use case."""

from typing import Any, Optional

import logfire
from pydantic import BaseModel

from materia.domain.model.user import UserChanges
from materia.domain.service import PermissionGuard, UserService
from materia.domain.value import PermissionCode, UserId

from ..base import BaseUseCase, parse_id
from .items import UserItem


class UpdateUserRequest(BaseModel):
    """Update user request."""

    session_token: Optional[str] = None
    user_id: str
    payload: Any = None


class UpdateUserUseCase(BaseUseCase):
    """Use case for changing another user's details and entities."""

    def __init__(self, guard: PermissionGuard, user_service: UserService) -> None:
        self.guard = guard
        self.user_service = user_service

    async def execute(self, request: UpdateUserRequest) -> UserItem:
        """Execute update user flow.

        Raises:
            MissingPermissionError: If the caller lacks user_edit
            ProtectedUserError: If callers target their own account
            NotFoundUserError: If the user does not exist
            EmailInUseError: If the email belongs to another user
        """
        with logfire.span("update_user.execute", user_id=request.user_id):
            actor = await self.guard.verify(request.session_token, PermissionCode.USER_EDIT)
            user_id = UserId(parse_id(request.user_id))
            data = UserChanges.model_validate(request.payload)

            user = await self.user_service.update_user(user_id, data, actor.user_id)
            return UserItem.from_domain(user)
