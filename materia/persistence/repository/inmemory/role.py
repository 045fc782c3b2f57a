"""In-memory implementation of Role repository for testing."""

from copy import deepcopy
from typing import Optional

from materia.domain.model.role import Role
from materia.domain.repository import RoleRepository
from materia.domain.value import PermissionCode, RoleId

from .store import InMemoryStore


class InMemoryRoleRepository(RoleRepository):
    """In-memory implementation of RoleRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_all(self) -> list[Role]:
        """Find all roles sorted by name."""
        roles = sorted(self._store.roles.values(), key=lambda r: r.name)
        return [deepcopy(role) for role in roles]

    async def find_by_id(self, role_id: RoleId, lock: bool = False) -> Optional[Role]:
        """Find role by ID. Locking is a no-op in memory."""
        role = self._store.roles.get(role_id)
        return deepcopy(role) if role else None

    async def count(self) -> int:
        """Count existing roles."""
        return len(self._store.roles)

    async def count_users(self, role_id: RoleId) -> int:
        """Count users holding a role."""
        return len(self._store.role_users.get(role_id, set()))

    async def save(self, role: Role) -> Role:
        """Save or update a role."""
        self._store.roles[role.id] = deepcopy(role)
        return deepcopy(role)

    async def delete(self, role_id: RoleId) -> None:
        """Delete a role."""
        self._store.roles.pop(role_id, None)
        self._store.role_users.pop(role_id, None)

    async def find_all_permissions(self) -> list[PermissionCode]:
        """Find the seeded permission codes."""
        return sorted(self._store.permissions, key=lambda p: p.value)
