"""List roles use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from materia.domain.service import PermissionGuard, RoleService

from ..base import BaseUseCase
from .items import RoleItem


class ListRolesRequest(BaseModel):
    """List roles request."""

    session_token: Optional[str] = None


class ListRolesResponse(BaseModel):
    """List roles response."""

    roles: list[RoleItem]


class ListRolesUseCase(BaseUseCase):
    """Use case for listing roles with their permissions."""

    def __init__(self, guard: PermissionGuard, role_service: RoleService) -> None:
        self.guard = guard
        self.role_service = role_service

    async def execute(self, request: ListRolesRequest) -> ListRolesResponse:
        with logfire.span("list_roles.execute"):
            await self.guard.verify(request.session_token)
            roles = await self.role_service.list_roles()
            return ListRolesResponse(roles=[RoleItem.from_domain(r) for r in roles])
