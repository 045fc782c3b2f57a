"""In-memory implementation of User repository for testing."""

from copy import deepcopy
from typing import Optional

from materia.domain.model.user import User
from materia.domain.repository import UserRepository
from materia.domain.value import EntityId, UserId

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing.

    Saving a user refreshes the actors of their open sessions, as the
    session join does in PostgreSQL.
    """

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def _load(self, user: User) -> User:
        role_ids = sorted(
            (role_id for role_id, users in self._store.role_users.items() if user.id in users),
            key=str,
        )
        return user.model_copy(update={"role_ids": role_ids}, deep=True)

    def _visible(self) -> list[User]:
        return [u for u in self._store.users.values() if u.deleted_at is None]

    async def find_all(self) -> list[User]:
        """Find all users sorted by name."""
        return [self._load(u) for u in sorted(self._visible(), key=lambda u: u.name)]

    async def find_by_id(self, user_id: UserId, lock: bool = False) -> Optional[User]:
        """Find user by ID. Locking is a no-op in memory."""
        user = self._store.users.get(user_id)
        if not user or user.deleted_at is not None:
            return None
        return self._load(user)

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email."""
        for user in self._visible():
            if user.email == email:
                return self._load(user)
        return None

    async def count(self) -> int:
        """Count users."""
        return len(self._visible())

    async def find_existing_entities(self, entity_ids: list[EntityId]) -> set[EntityId]:
        """Keep the entity identifiers that exist."""
        return {e for e in entity_ids if e in self._store.entities}

    async def save(self, user: User) -> User:
        """Save or update a user with their roles."""
        self._store.users[user.id] = deepcopy(user)
        for holders in self._store.role_users.values():
            holders.discard(user.id)
        for role_id in user.role_ids:
            self._store.role_users.setdefault(role_id, set()).add(user.id)

        for token, actor in list(self._store.sessions.items()):
            if actor.user_id != user.id:
                continue
            if user.deleted_at is not None:
                del self._store.sessions[token]
            else:
                self._store.sessions[token] = actor.model_copy(
                    update={
                        "name": user.name,
                        "active": user.active,
                        "entity_id": user.entity_selected_id,
                    }
                )
        return deepcopy(user)
