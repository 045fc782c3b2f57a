"""Session repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from materia.domain.model.actor import Actor


class SessionRepository(ABC):
    """Read-only access to sessions issued by the authentication service."""

    @abstractmethod
    async def find_actor(self, session_token: str) -> Optional[Actor]:
        """Resolve the user behind a non-expired session.

        Args:
            session_token: Opaque session token

        Returns:
            Actor with the union of its roles' permissions, None if the
            session does not exist or has expired
        """
        pass
