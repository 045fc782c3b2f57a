"""PostgreSQL implementation of Characteristic repository."""

from typing import Optional

from sqlalchemy import delete, func, select
from sqlalchemy.dialects.postgresql import insert

from materia.domain.model.characteristic import Characteristic, CharacteristicWithCount
from materia.domain.repository import CharacteristicRepository
from materia.domain.value import CharacteristicId, EntityId
from materia.persistence.mappers import (
    characteristic_to_dict,
    row_to_characteristic,
    row_to_characteristic_with_count,
)
from materia.persistence.repository.base import PostgresRepository
from materia.persistence.tables import (
    characteristics_table,
    material_characteristics_table,
    materials_table,
)


def _active_material_count(characteristic_id_column):
    """Correlated count of non-deleted materials holding a characteristic."""
    return (
        select(func.count())
        .select_from(
            material_characteristics_table.join(
                materials_table,
                materials_table.c.id == material_characteristics_table.c.material_id,
            )
        )
        .where(
            material_characteristics_table.c.characteristic_id == characteristic_id_column,
            materials_table.c.deleted_at.is_(None),
        )
        .scalar_subquery()
    )


class PostgresCharacteristicRepository(PostgresRepository, CharacteristicRepository):
    """PostgreSQL implementation of CharacteristicRepository."""

    async def find_all_with_count(
        self, entity_id: EntityId
    ) -> list[CharacteristicWithCount]:
        """Find all characteristics of an entity with their material counts."""
        stmt = (
            select(
                characteristics_table,
                _active_material_count(characteristics_table.c.id).label(
                    "material_count"
                ),
            )
            .where(characteristics_table.c.entity_id == entity_id)
            .order_by(characteristics_table.c.name)
        )
        result = await self._execute(stmt)
        return [row_to_characteristic_with_count(row._asdict()) for row in result]

    async def find_by_id(
        self,
        characteristic_id: CharacteristicId,
        entity_id: EntityId,
        lock: bool = False,
    ) -> Optional[Characteristic]:
        """Find characteristic by ID within an entity."""
        stmt = select(characteristics_table).where(
            characteristics_table.c.id == characteristic_id,
            characteristics_table.c.entity_id == entity_id,
        )
        if lock:
            stmt = stmt.with_for_update()
        result = await self._execute(stmt)
        row = result.fetchone()
        return row_to_characteristic(row._asdict()) if row else None

    async def find_by_ids(
        self, characteristic_ids: list[CharacteristicId], entity_id: EntityId
    ) -> list[Characteristic]:
        """Find multiple characteristics of an entity."""
        if not characteristic_ids:
            return []

        stmt = select(characteristics_table).where(
            characteristics_table.c.id.in_(characteristic_ids),
            characteristics_table.c.entity_id == entity_id,
        )
        result = await self._execute(stmt)
        return [row_to_characteristic(row._asdict()) for row in result]

    async def save(self, characteristic: Characteristic) -> Characteristic:
        """Insert or update a characteristic."""
        values = characteristic_to_dict(characteristic)
        stmt = insert(characteristics_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[characteristics_table.c.id],
            set_={
                "name": stmt.excluded.name,
                "description": stmt.excluded.description,
                "options": stmt.excluded.options,
                "units": stmt.excluded.units,
                "updated_at": stmt.excluded.updated_at,
            },
        )
        await self._execute(stmt)
        return characteristic

    async def delete(
        self, characteristic_id: CharacteristicId, entity_id: EntityId
    ) -> None:
        """Delete a characteristic.

        Values held by soft-deleted materials go with it (ON DELETE CASCADE).
        """
        stmt = delete(characteristics_table).where(
            characteristics_table.c.id == characteristic_id,
            characteristics_table.c.entity_id == entity_id,
        )
        await self._execute(stmt)

    async def count_active_materials(
        self, characteristic_id: CharacteristicId, entity_id: EntityId
    ) -> int:
        """Count non-deleted materials of the entity holding the characteristic."""
        stmt = (
            select(func.count())
            .select_from(
                material_characteristics_table.join(
                    materials_table,
                    materials_table.c.id == material_characteristics_table.c.material_id,
                )
            )
            .where(
                material_characteristics_table.c.characteristic_id == characteristic_id,
                materials_table.c.entity_id == entity_id,
                materials_table.c.deleted_at.is_(None),
            )
        )
        result = await self._execute(stmt)
        return result.scalar_one()
