"""PostgreSQL implementation of MaterialHistory repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import insert, select

from materia.domain.model.material_history import MaterialHistory
from materia.domain.repository import MaterialHistoryRepository
from materia.domain.value import MaterialId
from materia.persistence.mappers import material_history_to_dict, row_to_material_history
from materia.persistence.repository.base import PostgresRepository
from materia.persistence.tables import material_history_table


class PostgresMaterialHistoryRepository(PostgresRepository, MaterialHistoryRepository):
    """PostgreSQL implementation of MaterialHistoryRepository."""

    async def append(self, history: MaterialHistory) -> MaterialHistory:
        """Insert a snapshot. Snapshots are never updated."""
        stmt = insert(material_history_table).values(**material_history_to_dict(history))
        await self._execute(stmt)
        return history

    async def find_by_material(
        self,
        material_id: MaterialId,
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None,
    ) -> list[MaterialHistory]:
        """Find snapshots of a material in a date range, newest first."""
        stmt = select(material_history_table).where(
            material_history_table.c.material_id == material_id
        )
        if date_from is not None:
            stmt = stmt.where(material_history_table.c.created_at >= date_from)
        if date_to is not None:
            stmt = stmt.where(material_history_table.c.created_at <= date_to)
        stmt = stmt.order_by(material_history_table.c.created_at.desc())

        result = await self._execute(stmt)
        return [row_to_material_history(row._asdict()) for row in result]

    async def find_last(self, material_id: MaterialId) -> Optional[MaterialHistory]:
        """Find the most recent snapshot of a material."""
        stmt = (
            select(material_history_table)
            .where(material_history_table.c.material_id == material_id)
            .order_by(material_history_table.c.created_at.desc())
            .limit(1)
        )
        result = await self._execute(stmt)
        row = result.fetchone()
        return row_to_material_history(row._asdict()) if row else None
