"""Material history repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from materia.domain.model.material_history import MaterialHistory
from materia.domain.value import MaterialId


class MaterialHistoryRepository(ABC):
    """Repository interface for append-only material history snapshots."""

    @abstractmethod
    async def append(self, history: MaterialHistory) -> MaterialHistory:
        """Append a snapshot.

        Args:
            history: Snapshot to store

        Returns:
            Stored snapshot
        """
        pass

    @abstractmethod
    async def find_by_material(
        self,
        material_id: MaterialId,
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None,
    ) -> list[MaterialHistory]:
        """Find snapshots of a material, newest first.

        Args:
            material_id: Material identifier
            date_from: Inclusive lower bound on creation date
            date_to: Inclusive upper bound on creation date

        Returns:
            Snapshots in the range
        """
        pass

    @abstractmethod
    async def find_last(self, material_id: MaterialId) -> Optional[MaterialHistory]:
        """Find the most recent snapshot of a material.

        Args:
            material_id: Material identifier

        Returns:
            Latest snapshot if any, None otherwise
        """
        pass
