"""In-memory implementation of Tag repository for testing."""

from copy import deepcopy
from typing import Optional

from materia.domain.model.tag import Tag, TagWithCount
from materia.domain.repository import TagRepository
from materia.domain.value import EntityId, MaterialId, TagId

from .store import InMemoryStore


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_all_with_count(self, entity_id: EntityId) -> list[TagWithCount]:
        """Find tags of an entity sorted by name."""
        tags = sorted(
            (t for t in self._store.tags.values() if t.entity_id == entity_id),
            key=lambda t: t.name,
        )
        return [
            TagWithCount(
                **tag.model_dump(),
                material_count=len(await self.find_active_material_ids(tag.id)),
            )
            for tag in tags
        ]

    async def find_by_id(
        self, tag_id: TagId, entity_id: EntityId, lock: bool = False
    ) -> Optional[Tag]:
        """Find tag by ID. Locking is a no-op in memory."""
        tag = self._store.tags.get(tag_id)
        if not tag or tag.entity_id != entity_id:
            return None
        return deepcopy(tag)

    async def find_by_ids(self, tag_ids: list[TagId], entity_id: EntityId) -> list[Tag]:
        """Find multiple tags of an entity."""
        found = []
        for tag_id in tag_ids:
            tag = await self.find_by_id(tag_id, entity_id)
            if tag:
                found.append(tag)
        return found

    async def find_active_material_ids(self, tag_id: TagId) -> list[MaterialId]:
        """Find non-deleted materials carrying a tag."""
        return sorted(
            (
                material.id
                for material in self._store.materials.values()
                if material.is_active and tag_id in material.tag_ids
            ),
            key=str,
        )

    async def count_materials(self, tag_id: TagId) -> int:
        """Count every material carrying a tag, deleted ones included."""
        return sum(
            1 for material in self._store.materials.values() if tag_id in material.tag_ids
        )

    async def save(self, tag: Tag) -> Tag:
        """Save or update a tag."""
        self._store.tags[tag.id] = deepcopy(tag)
        return deepcopy(tag)

    async def delete(self, tag_id: TagId, entity_id: EntityId) -> None:
        """Delete a tag."""
        tag = self._store.tags.get(tag_id)
        if tag and tag.entity_id == entity_id:
            del self._store.tags[tag_id]
