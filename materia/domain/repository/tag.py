"""Tag repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from materia.domain.model.tag import Tag, TagWithCount
from materia.domain.value import EntityId, MaterialId, TagId


class TagRepository(ABC):
    """Repository interface for Tag aggregate."""

    @abstractmethod
    async def find_all_with_count(self, entity_id: EntityId) -> list[TagWithCount]:
        """Find all tags of an entity, sorted by name.

        Args:
            entity_id: Tenant scope

        Returns:
            Tags with the number of active materials carrying each
        """
        pass

    @abstractmethod
    async def find_by_id(
        self, tag_id: TagId, entity_id: EntityId, lock: bool = False
    ) -> Optional[Tag]:
        """Find tag by ID within an entity.

        Args:
            tag_id: Tag identifier
            entity_id: Tenant scope
            lock: Lock the row until the end of the transaction

        Returns:
            Tag if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, tag_ids: list[TagId], entity_id: EntityId) -> list[Tag]:
        """Find multiple tags of an entity in a single query.

        Args:
            tag_ids: Tag identifiers
            entity_id: Tenant scope

        Returns:
            Found tags (may be fewer than requested)
        """
        pass

    @abstractmethod
    async def find_active_material_ids(self, tag_id: TagId) -> list[MaterialId]:
        """Find the non-deleted materials carrying a tag.

        Args:
            tag_id: Tag identifier

        Returns:
            Material identifiers
        """
        pass

    @abstractmethod
    async def count_materials(self, tag_id: TagId) -> int:
        """Count every material carrying a tag, soft-deleted ones included.

        Args:
            tag_id: Tag identifier

        Returns:
            Number of material references
        """
        pass

    @abstractmethod
    async def save(self, tag: Tag) -> Tag:
        """Save or update a tag.

        Args:
            tag: Tag to save

        Returns:
            Saved tag
        """
        pass

    @abstractmethod
    async def delete(self, tag_id: TagId, entity_id: EntityId) -> None:
        """Delete a tag.

        Args:
            tag_id: Tag identifier
            entity_id: Tenant scope
        """
        pass
