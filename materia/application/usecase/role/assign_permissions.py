"""Assign permissions use case."""

from typing import Any, Optional

import logfire
from pydantic import BaseModel

from materia.domain.model.role import PermissionAssignment
from materia.domain.service import PermissionGuard, RoleService
from materia.domain.value import PermissionCode, RoleId

from ..base import BaseUseCase, parse_id
from .items import RoleItem


class AssignPermissionsRequest(BaseModel):
    """Assign permissions request."""

    session_token: Optional[str] = None
    role_id: str
    payload: Any = None


class AssignPermissionsUseCase(BaseUseCase):
    """Use case for replacing the permissions granted by a role."""

    def __init__(self, guard: PermissionGuard, role_service: RoleService) -> None:
        self.guard = guard
        self.role_service = role_service

    async def execute(self, request: AssignPermissionsRequest) -> RoleItem:
        """Execute assign permissions flow.

        Raises:
            MissingPermissionError: If the caller lacks role_edit
            pydantic.ValidationError: If a permission code is unknown
            NotFoundRoleError: If the role does not exist
            ProtectedRoleError: If the role is Super Admin
        """
        with logfire.span("assign_permissions.execute", role_id=request.role_id):
            actor = await self.guard.verify(request.session_token, PermissionCode.ROLE_EDIT)
            role_id = RoleId(parse_id(request.role_id))
            assignment = PermissionAssignment.model_validate(request.payload)

            role = await self.role_service.assign_permissions(
                role_id, assignment.permission_codes, actor.user_id
            )
            return RoleItem.from_domain(role)
