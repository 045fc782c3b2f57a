"""In-memory implementation of Characteristic repository for testing."""

from copy import deepcopy
from typing import Optional

from materia.domain.model.characteristic import Characteristic, CharacteristicWithCount
from materia.domain.repository import CharacteristicRepository
from materia.domain.value import CharacteristicId, EntityId

from .store import InMemoryStore


class InMemoryCharacteristicRepository(CharacteristicRepository):
    """In-memory implementation of CharacteristicRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_all_with_count(
        self, entity_id: EntityId
    ) -> list[CharacteristicWithCount]:
        """Find characteristics of an entity sorted by name."""
        characteristics = sorted(
            (c for c in self._store.characteristics.values() if c.entity_id == entity_id),
            key=lambda c: c.name,
        )
        return [
            CharacteristicWithCount(
                **c.model_dump(),
                material_count=await self.count_active_materials(c.id, entity_id),
            )
            for c in characteristics
        ]

    async def find_by_id(
        self,
        characteristic_id: CharacteristicId,
        entity_id: EntityId,
        lock: bool = False,
    ) -> Optional[Characteristic]:
        """Find characteristic by ID. Locking is a no-op in memory."""
        characteristic = self._store.characteristics.get(characteristic_id)
        if not characteristic or characteristic.entity_id != entity_id:
            return None
        return deepcopy(characteristic)

    async def find_by_ids(
        self, characteristic_ids: list[CharacteristicId], entity_id: EntityId
    ) -> list[Characteristic]:
        """Find multiple characteristics of an entity."""
        found = []
        for characteristic_id in characteristic_ids:
            characteristic = await self.find_by_id(characteristic_id, entity_id)
            if characteristic:
                found.append(characteristic)
        return found

    async def save(self, characteristic: Characteristic) -> Characteristic:
        """Save or update a characteristic."""
        self._store.characteristics[characteristic.id] = deepcopy(characteristic)
        return deepcopy(characteristic)

    async def delete(
        self, characteristic_id: CharacteristicId, entity_id: EntityId
    ) -> None:
        """Delete a characteristic and detach it from every material."""
        characteristic = self._store.characteristics.get(characteristic_id)
        if not characteristic or characteristic.entity_id != entity_id:
            return
        del self._store.characteristics[characteristic_id]
        for material in list(self._store.materials.values()):
            if characteristic_id in material.characteristic_ids:
                self._store.materials[material.id] = material.model_copy(
                    update={
                        "characteristics": [
                            mc
                            for mc in material.characteristics
                            if mc.characteristic_id != characteristic_id
                        ]
                    }
                )

    async def count_active_materials(
        self, characteristic_id: CharacteristicId, entity_id: EntityId
    ) -> int:
        """Count non-deleted materials of the entity using a characteristic."""
        return sum(
            1
            for material in self._store.materials.values()
            if material.entity_id == entity_id
            and material.is_active
            and characteristic_id in material.characteristic_ids
        )
