"""List permissions use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from materia.domain.service import PermissionGuard, RoleService
from materia.domain.value import PermissionCode

from ..base import BaseUseCase


class ListPermissionsRequest(BaseModel):
    """List permissions request."""

    session_token: Optional[str] = None


class ListPermissionsResponse(BaseModel):
    """List permissions response."""

    permission_codes: list[PermissionCode]


class ListPermissionsUseCase(BaseUseCase):
    """Use case for listing the permissions roles can grant."""

    def __init__(self, guard: PermissionGuard, role_service: RoleService) -> None:
        self.guard = guard
        self.role_service = role_service

    async def execute(self, request: ListPermissionsRequest) -> ListPermissionsResponse:
        with logfire.span("list_permissions.execute"):
            await self.guard.verify(request.session_token)
            permission_codes = await self.role_service.list_permissions()
            return ListPermissionsResponse(permission_codes=permission_codes)
