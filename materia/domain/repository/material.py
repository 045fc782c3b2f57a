"""Material repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from materia.domain.model.material import Material
from materia.domain.value import EntityId, MaterialId


class MaterialRepository(ABC):
    """Repository interface for Material aggregate."""

    @abstractmethod
    async def find_active(self, entity_id: EntityId) -> list[Material]:
        """Find non-deleted materials of an entity, most recently updated first.

        Args:
            entity_id: Tenant scope

        Returns:
            Materials with their tags and characteristic values
        """
        pass

    @abstractmethod
    async def find_by_id(
        self,
        material_id: MaterialId,
        entity_id: Optional[EntityId] = None,
        include_deleted: bool = False,
    ) -> Optional[Material]:
        """Find material by ID.

        Args:
            material_id: Material identifier
            entity_id: Tenant scope, or None for internal lookups
            include_deleted: Also return soft-deleted materials

        Returns:
            Material if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, material: Material) -> Material:
        """Save or update a material with its tags and characteristic values.

        Args:
            material: Material to save

        Returns:
            Saved material
        """
        pass
