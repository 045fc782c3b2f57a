"""Characteristic repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from materia.domain.model.characteristic import Characteristic, CharacteristicWithCount
from materia.domain.value import CharacteristicId, EntityId


class CharacteristicRepository(ABC):
    """Repository interface for Characteristic definitions."""

    @abstractmethod
    async def find_all_with_count(
        self, entity_id: EntityId
    ) -> list[CharacteristicWithCount]:
        """Find all characteristics of an entity, sorted by name.

        Args:
            entity_id: Tenant scope

        Returns:
            Characteristics with the number of materials referencing each
        """
        pass

    @abstractmethod
    async def find_by_id(
        self,
        characteristic_id: CharacteristicId,
        entity_id: EntityId,
        lock: bool = False,
    ) -> Optional[Characteristic]:
        """Find characteristic by ID within an entity.

        Args:
            characteristic_id: Characteristic identifier
            entity_id: Tenant scope
            lock: Lock the row until the end of the transaction

        Returns:
            Characteristic if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(
        self, characteristic_ids: list[CharacteristicId], entity_id: EntityId
    ) -> list[Characteristic]:
        """Find multiple characteristics of an entity in a single query.

        Args:
            characteristic_ids: Characteristic identifiers
            entity_id: Tenant scope

        Returns:
            Found characteristics (may be fewer than requested)
        """
        pass

    @abstractmethod
    async def save(self, characteristic: Characteristic) -> Characteristic:
        """Save or update a characteristic.

        Args:
            characteristic: Characteristic to save

        Returns:
            Saved characteristic
        """
        pass

    @abstractmethod
    async def delete(
        self, characteristic_id: CharacteristicId, entity_id: EntityId
    ) -> None:
        """Delete a characteristic.

        Args:
            characteristic_id: Characteristic identifier
            entity_id: Tenant scope
        """
        pass

    @abstractmethod
    async def count_active_materials(
        self, characteristic_id: CharacteristicId, entity_id: EntityId
    ) -> int:
        """Count non-deleted materials holding a value for a characteristic.

        Args:
            characteristic_id: Characteristic identifier
            entity_id: Tenant scope

        Returns:
            Number of active materials referencing the characteristic
        """
        pass
