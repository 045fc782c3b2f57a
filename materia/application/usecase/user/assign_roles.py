"""Assign roles use case."""

from typing import Any, Optional

import logfire
from pydantic import BaseModel

from materia.domain.model.user import RoleAssignment
from materia.domain.service import PermissionGuard, UserService
from materia.domain.value import PermissionCode, UserId

from ..base import BaseUseCase, parse_id
from .items import UserItem


class AssignRolesRequest(BaseModel):
    """Assign roles request."""

    session_token: Optional[str] = None
    user_id: str
    payload: Any = None


class AssignRolesUseCase(BaseUseCase):
    """Use case for replacing the roles held by a user."""

    def __init__(self, guard: PermissionGuard, user_service: UserService) -> None:
        self.guard = guard
        self.user_service = user_service

    async def execute(self, request: AssignRolesRequest) -> UserItem:
        """Execute assign roles flow.

        Raises:
            MissingPermissionError: If the caller lacks user_edit
            pydantic.ValidationError: If a role id is malformed
            NotFoundUserError: If the user does not exist
            NotFoundRoleError: If a role does not exist
        """
        with logfire.span("assign_roles.execute", user_id=request.user_id):
            actor = await self.guard.verify(request.session_token, PermissionCode.USER_EDIT)
            user_id = UserId(parse_id(request.user_id))
            assignment = RoleAssignment.model_validate(request.payload)

            user = await self.user_service.assign_roles(
                user_id, assignment.role_ids, actor.user_id
            )
            return UserItem.from_domain(user)
