"""Update role use case."""

from typing import Any, Optional

import logfire
from pydantic import BaseModel

from materia.domain.model.role import RoleData
from materia.domain.service import PermissionGuard, RoleService
from materia.domain.value import PermissionCode, RoleId

from ..base import BaseUseCase, parse_id
from .items import RoleItem


class UpdateRoleRequest(BaseModel):
    """Update role request."""

    session_token: Optional[str] = None
    role_id: str
    payload: Any = None


class UpdateRoleUseCase(BaseUseCase):
    """Use case for renaming or describing a role."""

    def __init__(self, guard: PermissionGuard, role_service: RoleService) -> None:
        self.guard = guard
        self.role_service = role_service

    async def execute(self, request: UpdateRoleRequest) -> RoleItem:
        """Execute update role flow.

        Raises:
            MissingPermissionError: If the caller lacks role_edit
            NotFoundRoleError: If the role does not exist
            ProtectedRoleError: If the role is Super Admin
        """
        with logfire.span("update_role.execute", role_id=request.role_id):
            actor = await self.guard.verify(request.session_token, PermissionCode.ROLE_EDIT)
            role_id = RoleId(parse_id(request.role_id))
            data = RoleData.model_validate(request.payload)

            role = await self.role_service.update_role(role_id, data, actor.user_id)
            return RoleItem.from_domain(role)
