"""In-memory implementation of Material repository for testing."""

from copy import deepcopy
from typing import Optional

from materia.domain.model.material import Material
from materia.domain.repository import MaterialRepository
from materia.domain.value import EntityId, MaterialId

from .store import InMemoryStore


class InMemoryMaterialRepository(MaterialRepository):
    """In-memory implementation of MaterialRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_active(self, entity_id: EntityId) -> list[Material]:
        """Find non-deleted materials, most recently updated first."""
        materials = [
            m
            for m in self._store.materials.values()
            if m.entity_id == entity_id and m.is_active
        ]
        materials.sort(key=lambda m: m.updated_at, reverse=True)
        return [deepcopy(m) for m in materials]

    async def find_by_id(
        self,
        material_id: MaterialId,
        entity_id: Optional[EntityId] = None,
        include_deleted: bool = False,
    ) -> Optional[Material]:
        """Find material by ID."""
        material = self._store.materials.get(material_id)
        if not material:
            return None
        if entity_id is not None and material.entity_id != entity_id:
            return None
        if not include_deleted and not material.is_active:
            return None
        return deepcopy(material)

    async def save(self, material: Material) -> Material:
        """Save or update a material."""
        self._store.materials[material.id] = deepcopy(material)
        return deepcopy(material)
