"""Role and permission routes."""

from typing import Any, Optional

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, Depends, status

from materia.application.usecase.role import (
    AssignPermissionsRequest,
    AssignPermissionsUseCase,
    CreateRoleRequest,
    CreateRoleUseCase,
    DeleteRoleRequest,
    DeleteRoleUseCase,
    ListPermissionsRequest,
    ListPermissionsResponse,
    ListPermissionsUseCase,
    ListRolesRequest,
    ListRolesResponse,
    ListRolesUseCase,
    RoleItem,
    UpdateRoleRequest,
    UpdateRoleUseCase,
)
from materia.domain.model.role import PermissionAssignment, RoleData
from materia.interface.api.openapi import json_body
from materia.interface.api.session import get_session_token

router = APIRouter(tags=["roles"], route_class=DishkaRoute)


@router.get("/roles", response_model=ListRolesResponse)
async def list_roles(
    use_case: FromDishka[ListRolesUseCase],
    session_token: Optional[str] = Depends(get_session_token),
) -> ListRolesResponse:
    """List roles with their permissions."""
    with logfire.span("api.list_roles"):
        request = ListRolesRequest(session_token=session_token)
        return await use_case.execute(request)


@router.post(
    "/roles",
    response_model=RoleItem,
    status_code=status.HTTP_201_CREATED,
    openapi_extra=json_body(RoleData),
)
async def create_role(
    use_case: FromDishka[CreateRoleUseCase],
    payload: Any = Body(default=None, include_in_schema=False),
    session_token: Optional[str] = Depends(get_session_token),
) -> RoleItem:
    """Create a role. Requires ``role_create``."""
    with logfire.span("api.create_role"):
        request = CreateRoleRequest(session_token=session_token, payload=payload)
        return await use_case.execute(request)


@router.put("/roles/{role_id}", response_model=RoleItem, openapi_extra=json_body(RoleData))
async def update_role(
    role_id: str,
    use_case: FromDishka[UpdateRoleUseCase],
    payload: Any = Body(default=None, include_in_schema=False),
    session_token: Optional[str] = Depends(get_session_token),
) -> RoleItem:
    """Rename a role. The Super Admin role cannot be changed."""
    with logfire.span("api.update_role", role_id=role_id):
        request = UpdateRoleRequest(
            session_token=session_token, role_id=role_id, payload=payload
        )
        return await use_case.execute(request)


@router.delete("/roles/{role_id}", response_model=RoleItem)
async def delete_role(
    role_id: str,
    use_case: FromDishka[DeleteRoleUseCase],
    session_token: Optional[str] = Depends(get_session_token),
) -> RoleItem:
    """Delete a role no user holds."""
    with logfire.span("api.delete_role", role_id=role_id):
        request = DeleteRoleRequest(session_token=session_token, role_id=role_id)
        return await use_case.execute(request)


@router.put(
    "/roles/{role_id}/permissions",
    response_model=RoleItem,
    openapi_extra=json_body(PermissionAssignment),
)
async def assign_permissions(
    role_id: str,
    use_case: FromDishka[AssignPermissionsUseCase],
    payload: Any = Body(default=None, include_in_schema=False),
    session_token: Optional[str] = Depends(get_session_token),
) -> RoleItem:
    """Replace the permissions of a role.

    Args:
        role_id: Role UUID
        use_case: Assign permissions use case (injected)
        payload: ``{"permissionCodes": [...]}``
        session_token: Session token from cookie

    Returns:
        Role with its new permissions
    """
    with logfire.span("api.assign_permissions", role_id=role_id):
        request = AssignPermissionsRequest(
            session_token=session_token, role_id=role_id, payload=payload
        )
        return await use_case.execute(request)


@router.get("/permissions", response_model=ListPermissionsResponse)
async def list_permissions(
    use_case: FromDishka[ListPermissionsUseCase],
    session_token: Optional[str] = Depends(get_session_token),
) -> ListPermissionsResponse:
    """List every permission code that can be granted."""
    with logfire.span("api.list_permissions"):
        request = ListPermissionsRequest(session_token=session_token)
        return await use_case.execute(request)
