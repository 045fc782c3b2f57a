"""User administration routes."""

from typing import Any, Optional

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, Depends, status

from materia.application.usecase.user import (
    AssignRolesRequest,
    AssignRolesUseCase,
    ChangeSelectedEntityRequest,
    ChangeSelectedEntityUseCase,
    CreateUserRequest,
    CreateUserUseCase,
    DeleteUserRequest,
    DeleteUserUseCase,
    ListUsersRequest,
    ListUsersResponse,
    ListUsersUseCase,
    UpdateUserRequest,
    UpdateUserUseCase,
    UserItem,
)
from materia.domain.model.user import (
    EntitySelection,
    NewUser,
    RoleAssignment,
    UserChanges,
)
from materia.interface.api.openapi import json_body
from materia.interface.api.session import get_session_token

router = APIRouter(
    prefix="/users",
    tags=["users"],
    route_class=DishkaRoute,
)


@router.get("", response_model=ListUsersResponse)
async def list_users(
    use_case: FromDishka[ListUsersUseCase],
    session_token: Optional[str] = Depends(get_session_token),
) -> ListUsersResponse:
    """List users with their entities and roles."""
    with logfire.span("api.list_users"):
        request = ListUsersRequest(session_token=session_token)
        return await use_case.execute(request)


@router.post(
    "",
    response_model=UserItem,
    status_code=status.HTTP_201_CREATED,
    openapi_extra=json_body(NewUser),
)
async def create_user(
    use_case: FromDishka[CreateUserUseCase],
    payload: Any = Body(default=None, include_in_schema=False),
    session_token: Optional[str] = Depends(get_session_token),
) -> UserItem:
    """Create a user. Requires ``user_create``."""
    with logfire.span("api.create_user"):
        request = CreateUserRequest(session_token=session_token, payload=payload)
        return await use_case.execute(request)


@router.put("/me/entity", response_model=UserItem, openapi_extra=json_body(EntitySelection))
async def change_selected_entity(
    use_case: FromDishka[ChangeSelectedEntityUseCase],
    payload: Any = Body(default=None, include_in_schema=False),
    session_token: Optional[str] = Depends(get_session_token),
) -> UserItem:
    """Switch the entity the caller works in.

    Args:
        use_case: Change selected entity use case (injected)
        payload: ``{"entityId": ...}``, one of the caller's entities
        session_token: Session token from cookie

    Returns:
        The caller's account with its new selected entity
    """
    with logfire.span("api.change_selected_entity"):
        request = ChangeSelectedEntityRequest(session_token=session_token, payload=payload)
        return await use_case.execute(request)


@router.put("/{user_id}", response_model=UserItem, openapi_extra=json_body(UserChanges))
async def update_user(
    user_id: str,
    use_case: FromDishka[UpdateUserUseCase],
    payload: Any = Body(default=None, include_in_schema=False),
    session_token: Optional[str] = Depends(get_session_token),
) -> UserItem:
    """Change a user's details and entities. Requires ``user_edit``."""
    with logfire.span("api.update_user", user_id=user_id):
        request = UpdateUserRequest(
            session_token=session_token, user_id=user_id, payload=payload
        )
        return await use_case.execute(request)


@router.put(
    "/{user_id}/roles", response_model=UserItem, openapi_extra=json_body(RoleAssignment)
)
async def assign_roles(
    user_id: str,
    use_case: FromDishka[AssignRolesUseCase],
    payload: Any = Body(default=None, include_in_schema=False),
    session_token: Optional[str] = Depends(get_session_token),
) -> UserItem:
    """Replace the roles held by a user. Requires ``user_edit``."""
    with logfire.span("api.assign_roles", user_id=user_id):
        request = AssignRolesRequest(
            session_token=session_token, user_id=user_id, payload=payload
        )
        return await use_case.execute(request)


@router.delete("/{user_id}", response_model=UserItem)
async def delete_user(
    user_id: str,
    use_case: FromDishka[DeleteUserUseCase],
    session_token: Optional[str] = Depends(get_session_token),
) -> UserItem:
    """Delete a user. Users cannot delete themselves or a Super Admin."""
    with logfire.span("api.delete_user", user_id=user_id):
        request = DeleteUserRequest(session_token=session_token, user_id=user_id)
        return await use_case.execute(request)
