"""Permission guard domain service."""

from typing import Optional

import logfire

from materia.domain.error import MissingPermissionError, NoActiveSessionError
from materia.domain.model.actor import Actor
from materia.domain.repository import SessionRepository
from materia.domain.value import PermissionCode

from .base import Service


class PermissionGuard(Service):
    """Resolves the actor behind a session and checks its permissions.

    Every operation calls the guard before validating its input or touching
    the store.
    """

    def __init__(self, session_repository: SessionRepository) -> None:
        """Initialize permission guard.

        Args:
            session_repository: Session repository
        """
        self.session_repository = session_repository

    async def verify(
        self,
        session_token: Optional[str],
        required_permission: Optional[PermissionCode] = None,
    ) -> Actor:
        """Verify a session and optionally a permission.

        Args:
            session_token: Session token sent by the client
            required_permission: Permission the operation needs, if any

        Returns:
            Actor behind the session

        Raises:
            NoActiveSessionError: No session, an expired one, or an inactive user
            MissingPermissionError: If the actor lacks the permission
        """
        if not session_token:
            logfire.warn("Request without session")
            raise NoActiveSessionError("Unauthorized: No active session")

        actor = await self.session_repository.find_actor(session_token)
        if actor is None or not actor.active:
            logfire.warn("No active session")
            raise NoActiveSessionError("Unauthorized: No active session")

        if required_permission and not actor.has_permission(required_permission):
            logfire.warn(
                "Missing permission",
                user_id=str(actor.user_id),
                permission=required_permission.value,
            )
            raise MissingPermissionError(required_permission.value)

        return actor
