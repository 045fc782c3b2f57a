"""Create role use case."""

from typing import Any, Optional

import logfire
from pydantic import BaseModel

from materia.domain.model.role import RoleData
from materia.domain.service import PermissionGuard, RoleService
from materia.domain.value import PermissionCode

from ..base import BaseUseCase
from .items import RoleItem


class CreateRoleRequest(BaseModel):
    """Create role request."""

    session_token: Optional[str] = None
    payload: Any = None


class CreateRoleUseCase(BaseUseCase):
    """Use case for creating a role without permissions."""

    def __init__(self, guard: PermissionGuard, role_service: RoleService) -> None:
        self.guard = guard
        self.role_service = role_service

    async def execute(self, request: CreateRoleRequest) -> RoleItem:
        """Execute create role flow.

        Raises:
            MissingPermissionError: If the caller lacks role_create
            pydantic.ValidationError: If the data is invalid
            RoleLimitReachedError: If the configured maximum is reached
        """
        with logfire.span("create_role.execute"):
            actor = await self.guard.verify(request.session_token, PermissionCode.ROLE_CREATE)
            data = RoleData.model_validate(request.payload)

            role = await self.role_service.create_role(data, actor.user_id)
            return RoleItem.from_domain(role)
