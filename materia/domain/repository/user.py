"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from materia.domain.model.user import User
from materia.domain.value import EntityId, UserId


class UserRepository(ABC):
    """Repository for users, their entities and their roles.

    Deleted users are invisible to every finder.
    """

    @abstractmethod
    async def find_all(self) -> list[User]:
        """Find all users, sorted by name."""
        pass

    @abstractmethod
    async def find_by_id(self, user_id: UserId, lock: bool = False) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User identifier
            lock: Lock the row until the end of the transaction

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email.

        Args:
            email: Lowercased email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count users."""
        pass

    @abstractmethod
    async def find_existing_entities(self, entity_ids: list[EntityId]) -> set[EntityId]:
        """Keep the entity identifiers that exist.

        Args:
            entity_ids: Entity identifiers to check

        Returns:
            Identifiers of existing entities
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update), replacing its entities and roles.

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass
