"""PostgreSQL implementation of Tag repository."""

from typing import Optional

from sqlalchemy import delete, func, select
from sqlalchemy.dialects.postgresql import insert

from materia.domain.model.tag import Tag, TagWithCount
from materia.domain.repository import TagRepository
from materia.domain.value import EntityId, MaterialId, TagId
from materia.persistence.mappers import row_to_tag, row_to_tag_with_count, tag_to_dict
from materia.persistence.repository.base import PostgresRepository
from materia.persistence.tables import material_tags_table, materials_table, tags_table

_tag_materials = material_tags_table.join(
    materials_table, materials_table.c.id == material_tags_table.c.material_id
)


class PostgresTagRepository(PostgresRepository, TagRepository):
    """PostgreSQL implementation of TagRepository."""

    async def find_all_with_count(self, entity_id: EntityId) -> list[TagWithCount]:
        """Find all tags of an entity with their active material counts."""
        material_count = (
            select(func.count())
            .select_from(_tag_materials)
            .where(
                material_tags_table.c.tag_id == tags_table.c.id,
                materials_table.c.deleted_at.is_(None),
            )
            .scalar_subquery()
        )
        stmt = (
            select(tags_table, material_count.label("material_count"))
            .where(tags_table.c.entity_id == entity_id)
            .order_by(tags_table.c.name)
        )
        result = await self._execute(stmt)
        return [row_to_tag_with_count(row._asdict()) for row in result]

    async def find_by_id(
        self, tag_id: TagId, entity_id: EntityId, lock: bool = False
    ) -> Optional[Tag]:
        """Find tag by ID within an entity."""
        stmt = select(tags_table).where(
            tags_table.c.id == tag_id, tags_table.c.entity_id == entity_id
        )
        if lock:
            stmt = stmt.with_for_update()
        result = await self._execute(stmt)
        row = result.fetchone()
        return row_to_tag(row._asdict()) if row else None

    async def find_by_ids(self, tag_ids: list[TagId], entity_id: EntityId) -> list[Tag]:
        """Find multiple tags of an entity in a single query."""
        if not tag_ids:
            return []

        stmt = select(tags_table).where(
            tags_table.c.id.in_(tag_ids), tags_table.c.entity_id == entity_id
        )
        result = await self._execute(stmt)
        return [row_to_tag(row._asdict()) for row in result]

    async def find_active_material_ids(self, tag_id: TagId) -> list[MaterialId]:
        """Find the non-deleted materials carrying a tag."""
        stmt = (
            select(material_tags_table.c.material_id)
            .select_from(_tag_materials)
            .where(
                material_tags_table.c.tag_id == tag_id,
                materials_table.c.deleted_at.is_(None),
            )
            .order_by(material_tags_table.c.material_id)
        )
        result = await self._execute(stmt)
        return [MaterialId(material_id) for material_id in result.scalars()]

    async def count_materials(self, tag_id: TagId) -> int:
        """Count every material carrying a tag, soft-deleted ones included."""
        stmt = (
            select(func.count())
            .select_from(material_tags_table)
            .where(material_tags_table.c.tag_id == tag_id)
        )
        result = await self._execute(stmt)
        return result.scalar_one()

    async def save(self, tag: Tag) -> Tag:
        """Insert or update a tag."""
        stmt = insert(tags_table).values(**tag_to_dict(tag))
        stmt = stmt.on_conflict_do_update(
            index_elements=[tags_table.c.id],
            set_={
                "name": stmt.excluded.name,
                "color": stmt.excluded.color,
                "font_color": stmt.excluded.font_color,
                "updated_at": stmt.excluded.updated_at,
            },
        )
        await self._execute(stmt)
        return tag

    async def delete(self, tag_id: TagId, entity_id: EntityId) -> None:
        """Delete a tag."""
        stmt = delete(tags_table).where(
            tags_table.c.id == tag_id, tags_table.c.entity_id == entity_id
        )
        await self._execute(stmt)
