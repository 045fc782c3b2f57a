"""Delete role use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from materia.domain.service import PermissionGuard, RoleService
from materia.domain.value import PermissionCode, RoleId

from ..base import BaseUseCase, parse_id
from .items import RoleItem


class DeleteRoleRequest(BaseModel):
    """Delete role request."""

    session_token: Optional[str] = None
    role_id: str


class DeleteRoleUseCase(BaseUseCase):
    """Use case for deleting a role no user holds."""

    def __init__(self, guard: PermissionGuard, role_service: RoleService) -> None:
        self.guard = guard
        self.role_service = role_service

    async def execute(self, request: DeleteRoleRequest) -> RoleItem:
        """Execute delete role flow. Deleting requires the create permission."""
        with logfire.span("delete_role.execute", role_id=request.role_id):
            actor = await self.guard.verify(request.session_token, PermissionCode.ROLE_CREATE)
            role_id = RoleId(parse_id(request.role_id))

            role = await self.role_service.delete_role(role_id, actor.user_id)
            return RoleItem.from_domain(role)
