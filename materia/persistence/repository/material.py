"""PostgreSQL implementation of Material repository."""

from collections import defaultdict
from typing import Any, Optional

from sqlalchemy import delete, insert, select
from sqlalchemy.dialects.postgresql import insert as pg_insert

from materia.domain.model.material import Material, MaterialCharacteristic
from materia.domain.repository import MaterialRepository
from materia.domain.value import EntityId, MaterialId, TagId
from materia.persistence.mappers import (
    material_to_dict,
    row_to_material,
    row_to_material_characteristic,
    value_to_json,
)
from materia.persistence.repository.base import PostgresRepository
from materia.persistence.tables import (
    material_characteristics_table,
    material_tags_table,
    materials_table,
)


class PostgresMaterialRepository(PostgresRepository, MaterialRepository):
    """PostgreSQL implementation of MaterialRepository.

    Tags and characteristic values live in join tables, loaded in one query
    each for a whole page of materials.
    """

    async def find_active(self, entity_id: EntityId) -> list[Material]:
        """Find non-deleted materials, most recently updated first."""
        stmt = (
            select(materials_table)
            .where(
                materials_table.c.entity_id == entity_id,
                materials_table.c.deleted_at.is_(None),
            )
            .order_by(materials_table.c.updated_at.desc())
        )
        result = await self._execute(stmt)
        return await self._with_relations([row._asdict() for row in result])

    async def find_by_id(
        self,
        material_id: MaterialId,
        entity_id: Optional[EntityId] = None,
        include_deleted: bool = False,
    ) -> Optional[Material]:
        """Find material by ID."""
        stmt = select(materials_table).where(materials_table.c.id == material_id)
        if entity_id is not None:
            stmt = stmt.where(materials_table.c.entity_id == entity_id)
        if not include_deleted:
            stmt = stmt.where(materials_table.c.deleted_at.is_(None))

        result = await self._execute(stmt)
        row = result.fetchone()
        if not row:
            return None
        materials = await self._with_relations([row._asdict()])
        return materials[0]

    async def save(self, material: Material) -> Material:
        """Insert or update a material and replace its relations."""
        values = material_to_dict(material)
        stmt = pg_insert(materials_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[materials_table.c.id],
            set_={
                "name": stmt.excluded.name,
                "description": stmt.excluded.description,
                "updated_at": stmt.excluded.updated_at,
                "deleted_at": stmt.excluded.deleted_at,
            },
        )
        await self._execute(stmt)

        await self._execute(
            delete(material_tags_table).where(
                material_tags_table.c.material_id == material.id
            )
        )
        if material.tag_ids:
            await self._execute(
                insert(material_tags_table),
                [
                    {"material_id": material.id, "tag_id": tag_id, "position": position}
                    for position, tag_id in enumerate(material.tag_ids)
                ],
            )

        await self._execute(
            delete(material_characteristics_table).where(
                material_characteristics_table.c.material_id == material.id
            )
        )
        if material.characteristics:
            await self._execute(
                insert(material_characteristics_table),
                [
                    {
                        "material_id": material.id,
                        "characteristic_id": mc.characteristic_id,
                        "position": position,
                        "value": value_to_json(mc),
                    }
                    for position, mc in enumerate(material.characteristics)
                ],
            )

        return material

    async def _with_relations(self, rows: list[dict[str, Any]]) -> list[Material]:
        if not rows:
            return []
        material_ids = [row["id"] for row in rows]

        tags_stmt = (
            select(material_tags_table)
            .where(material_tags_table.c.material_id.in_(material_ids))
            .order_by(material_tags_table.c.position)
        )
        tag_ids: dict[Any, list[TagId]] = defaultdict(list)
        for row in await self._execute(tags_stmt):
            tag_ids[row.material_id].append(TagId(row.tag_id))

        values_stmt = (
            select(material_characteristics_table)
            .where(material_characteristics_table.c.material_id.in_(material_ids))
            .order_by(material_characteristics_table.c.position)
        )
        values: dict[Any, list[MaterialCharacteristic]] = defaultdict(list)
        for row in await self._execute(values_stmt):
            values[row.material_id].append(row_to_material_characteristic(row._asdict()))

        return [
            row_to_material(row, tag_ids[row["id"]], values[row["id"]]) for row in rows
        ]
