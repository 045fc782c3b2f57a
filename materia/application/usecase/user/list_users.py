"""List users use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from materia.domain.service import PermissionGuard, UserService

from ..base import BaseUseCase
from .items import UserItem


class ListUsersRequest(BaseModel):
    """List users request."""

    session_token: Optional[str] = None


class ListUsersResponse(BaseModel):
    """List users response."""

    users: list[UserItem]


class ListUsersUseCase(BaseUseCase):
    """Use case for listing users with their entities and roles."""

    def __init__(self, guard: PermissionGuard, user_service: UserService) -> None:
        self.guard = guard
        self.user_service = user_service

    async def execute(self, request: ListUsersRequest) -> ListUsersResponse:
        with logfire.span("list_users.execute"):
            await self.guard.verify(request.session_token)
            users = await self.user_service.list_users()
            return ListUsersResponse(users=[UserItem.from_domain(u) for u in users])
