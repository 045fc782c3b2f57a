"""Role repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from materia.domain.model.role import Role
from materia.domain.value import PermissionCode, RoleId


class RoleRepository(ABC):
    """Repository interface for roles and their permissions."""

    @abstractmethod
    async def find_all(self) -> list[Role]:
        """Find all roles, sorted by name.

        Returns:
            Roles with their permission codes
        """
        pass

    @abstractmethod
    async def find_by_id(self, role_id: RoleId, lock: bool = False) -> Optional[Role]:
        """Find role by ID.

        Args:
            role_id: Role identifier
            lock: Lock the row until the end of the transaction

        Returns:
            Role if found, None otherwise
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count existing roles."""
        pass

    @abstractmethod
    async def count_users(self, role_id: RoleId) -> int:
        """Count users holding a role.

        Args:
            role_id: Role identifier

        Returns:
            Number of users
        """
        pass

    @abstractmethod
    async def save(self, role: Role) -> Role:
        """Save or update a role, replacing its permission set.

        Args:
            role: Role to save

        Returns:
            Saved role
        """
        pass

    @abstractmethod
    async def delete(self, role_id: RoleId) -> None:
        """Delete a role.

        Args:
            role_id: Role identifier
        """
        pass

    @abstractmethod
    async def find_all_permissions(self) -> list[PermissionCode]:
        """Find the seeded permission codes.

        Returns:
            Permission codes, sorted
        """
        pass
