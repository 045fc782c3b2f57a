"""User use cases."""

from .assign_roles import AssignRolesRequest, AssignRolesUseCase
from .change_selected_entity import (
    ChangeSelectedEntityRequest,
    ChangeSelectedEntityUseCase,
)
from .create_user import CreateUserRequest, CreateUserUseCase
from .delete_user import DeleteUserRequest, DeleteUserUseCase
from .items import UserItem
from .list_users import ListUsersRequest, ListUsersResponse, ListUsersUseCase
from .update_user import UpdateUserRequest, UpdateUserUseCase

__all__ = [
    "AssignRolesRequest",
    "AssignRolesUseCase",
    "ChangeSelectedEntityRequest",
    "ChangeSelectedEntityUseCase",
    "CreateUserRequest",
    "CreateUserUseCase",
    "DeleteUserRequest",
    "DeleteUserUseCase",
    "ListUsersRequest",
    "ListUsersResponse",
    "ListUsersUseCase",
    "UpdateUserRequest",
    "UpdateUserUseCase",
    "UserItem",
]
