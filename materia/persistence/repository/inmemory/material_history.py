"""In-memory implementation of MaterialHistory repository for testing."""

from copy import deepcopy
from datetime import datetime
from typing import Optional

from materia.domain.model.material_history import MaterialHistory
from materia.domain.repository import MaterialHistoryRepository
from materia.domain.value import MaterialId

from .store import InMemoryStore


class InMemoryMaterialHistoryRepository(MaterialHistoryRepository):
    """In-memory implementation of MaterialHistoryRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def append(self, history: MaterialHistory) -> MaterialHistory:
        """Append a snapshot."""
        self._store.history.append(deepcopy(history))
        return deepcopy(history)

    async def find_by_material(
        self,
        material_id: MaterialId,
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None,
    ) -> list[MaterialHistory]:
        """Find snapshots of a material in a date range, newest first."""
        snapshots = [
            h
            for h in self._store.history
            if h.material_id == material_id
            and (date_from is None or h.created_at >= date_from)
            and (date_to is None or h.created_at <= date_to)
        ]
        snapshots.sort(key=lambda h: h.created_at, reverse=True)
        return [deepcopy(h) for h in snapshots]

    async def find_last(self, material_id: MaterialId) -> Optional[MaterialHistory]:
        """Find the most recent snapshot of a material."""
        snapshots = await self.find_by_material(material_id)
        return snapshots[0] if snapshots else None
