"""PostgreSQL implementation of User repository."""

from collections import defaultdict
from typing import Any, Optional
from uuid import UUID

from sqlalchemy import delete, func, insert, select
from sqlalchemy.dialects.postgresql import insert as pg_insert

from materia.domain.model.user import User
from materia.domain.repository import UserRepository
from materia.domain.value import EntityId, UserId
from materia.persistence.mappers import row_to_user, user_to_dict
from materia.persistence.repository.base import PostgresRepository
from materia.persistence.tables import (
    entities_table,
    user_entities_table,
    user_roles_table,
    users_table,
)


class PostgresUserRepository(PostgresRepository, UserRepository):
    """PostgreSQL implementation of UserRepository."""

    async def find_all(self) -> list[User]:
        """Find all users with their links, sorted by name."""
        result = await self._execute(
            select(users_table)
            .where(users_table.c.deleted_at.is_(None))
            .order_by(users_table.c.name)
        )
        return await self._with_links([row._asdict() for row in result])

    async def find_by_id(self, user_id: UserId, lock: bool = False) -> Optional[User]:
        """Find user by ID."""
        stmt = select(users_table).where(
            users_table.c.id == user_id, users_table.c.deleted_at.is_(None)
        )
        if lock:
            stmt = stmt.with_for_update()
        return await self._find_one(stmt)

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email."""
        stmt = select(users_table).where(
            users_table.c.email == email, users_table.c.deleted_at.is_(None)
        )
        return await self._find_one(stmt)

    async def count(self) -> int:
        """Count users."""
        result = await self._execute(
            select(func.count())
            .select_from(users_table)
            .where(users_table.c.deleted_at.is_(None))
        )
        return result.scalar_one()

    async def find_existing_entities(self, entity_ids: list[EntityId]) -> set[EntityId]:
        """Keep the entity identifiers that exist."""
        if not entity_ids:
            return set()
        result = await self._execute(
            select(entities_table.c.id).where(entities_table.c.id.in_(entity_ids))
        )
        return {EntityId(entity_id) for entity_id in result.scalars()}

    async def save(self, user: User) -> User:
        """Insert or update a user and replace its entities and roles."""
        stmt = pg_insert(users_table).values(**user_to_dict(user))
        stmt = stmt.on_conflict_do_update(
            index_elements=[users_table.c.id],
            set_={
                "name": stmt.excluded.name,
                "email": stmt.excluded.email,
                "active": stmt.excluded.active,
                "entity_selected_id": stmt.excluded.entity_selected_id,
                "deleted_at": stmt.excluded.deleted_at,
            },
        )
        await self._execute(stmt)

        await self._replace_links(user_entities_table, "entity_id", user.id, user.entity_ids)
        await self._replace_links(user_roles_table, "role_id", user.id, user.role_ids)
        return user

    async def _replace_links(
        self, table: Any, column: str, user_id: UserId, ids: list[UUID]
    ) -> None:
        await self._execute(delete(table).where(table.c.user_id == user_id))
        if ids:
            await self._execute(
                insert(table), [{"user_id": user_id, column: value} for value in ids]
            )

    async def _find_one(self, stmt: Any) -> Optional[User]:
        result = await self._execute(stmt)
        row = result.fetchone()
        if not row:
            return None
        [user] = await self._with_links([row._asdict()])
        return user

    async def _with_links(self, rows: list[dict[str, Any]]) -> list[User]:
        if not rows:
            return []
        user_ids = [row["id"] for row in rows]

        entities: dict[UUID, list[UUID]] = defaultdict(list)
        result = await self._execute(
            select(user_entities_table).where(user_entities_table.c.user_id.in_(user_ids))
        )
        for link in result:
            entities[link.user_id].append(link.entity_id)

        roles: dict[UUID, list[UUID]] = defaultdict(list)
        result = await self._execute(
            select(user_roles_table)
            .where(user_roles_table.c.user_id.in_(user_ids))
            .order_by(user_roles_table.c.role_id)
        )
        for link in result:
            roles[link.user_id].append(link.role_id)

        return [row_to_user(row, entities[row["id"]], roles[row["id"]]) for row in rows]
