"""Role use cases."""

from .assign_permissions import AssignPermissionsRequest, AssignPermissionsUseCase
from .create_role import CreateRoleRequest, CreateRoleUseCase
from .delete_role import DeleteRoleRequest, DeleteRoleUseCase
from .items import RoleItem
from .list_permissions import (
    ListPermissionsRequest,
    ListPermissionsResponse,
    ListPermissionsUseCase,
)
from .list_roles import ListRolesRequest, ListRolesResponse, ListRolesUseCase
from .update_role import UpdateRoleRequest, UpdateRoleUseCase

__all__ = [
    "AssignPermissionsRequest",
    "AssignPermissionsUseCase",
    "CreateRoleRequest",
    "CreateRoleUseCase",
    "DeleteRoleRequest",
    "DeleteRoleUseCase",
    "ListPermissionsRequest",
    "ListPermissionsResponse",
    "ListPermissionsUseCase",
    "ListRolesRequest",
    "ListRolesResponse",
    "ListRolesUseCase",
    "RoleItem",
    "UpdateRoleRequest",
    "UpdateRoleUseCase",
]
