"""Create user use case."""

from typing import Any, Optional

import logfire
from pydantic import BaseModel

from materia.domain.model.user import NewUser
from materia.domain.service import PermissionGuard, UserService
from materia.domain.value import PermissionCode

from ..base import BaseUseCase
from .items import UserItem


class CreateUserRequest(BaseModel):
    """Create user request."""

    session_token: Optional[str] = None
    payload: Any = None


class CreateUserUseCase(BaseUseCase):
    """Use case for creating a user account.

    Inviting the new user to set a password is left to the authentication
    service.
    """

    def __init__(self, guard: PermissionGuard, user_service: UserService) -> None:
        self.guard = guard
        self.user_service = user_service

    async def execute(self, request: CreateUserRequest) -> UserItem:
        """Execute create user flow.

        Raises:
            MissingPermissionError: If the caller lacks user_create
            pydantic.ValidationError: If the data is invalid
            EmailInUseError: If the email belongs to another user
            NotFoundEntityError: If an entity does not exist
            UserLimitReachedError: If the configured maximum is reached
        """
        with logfire.span("create_user.execute"):
            actor = await self.guard.verify(request.session_token, PermissionCode.USER_CREATE)
            data = NewUser.model_validate(request.payload)

            user = await self.user_service.create_user(data, actor.user_id)
            return UserItem.from_domain(user)
