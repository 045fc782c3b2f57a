"""PostgreSQL implementation of Session repository."""

from typing import Optional

from sqlalchemy import func, select

from materia.domain.model.actor import Actor
from materia.domain.repository import SessionRepository
from materia.domain.value import EntityId, PermissionCode, UserId
from materia.persistence.repository.base import PostgresRepository
from materia.persistence.tables import (
    role_permissions_table,
    sessions_table,
    user_roles_table,
    users_table,
)


class PostgresSessionRepository(PostgresRepository, SessionRepository):
    """Reads sessions written by the authentication service."""

    async def find_actor(self, session_token: str) -> Optional[Actor]:
        """Resolve the user behind a non-expired session."""
        stmt = (
            select(
                users_table.c.id,
                users_table.c.name,
                users_table.c.active,
                users_table.c.entity_selected_id,
                sessions_table.c.expires_at,
            )
            .select_from(
                sessions_table.join(users_table, users_table.c.id == sessions_table.c.user_id)
            )
            .where(
                sessions_table.c.token == session_token,
                sessions_table.c.expires_at > func.now(),
                users_table.c.deleted_at.is_(None),
            )
        )
        result = await self._execute(stmt)
        row = result.fetchone()
        if not row:
            return None

        permissions = await self._execute(
            select(role_permissions_table.c.permission_code)
            .distinct()
            .select_from(
                user_roles_table.join(
                    role_permissions_table,
                    role_permissions_table.c.role_id == user_roles_table.c.role_id,
                )
            )
            .where(user_roles_table.c.user_id == row.id)
        )

        return Actor(
            user_id=UserId(row.id),
            name=row.name,
            active=row.active,
            entity_id=EntityId(row.entity_selected_id),
            permissions=frozenset(PermissionCode(code) for code in permissions.scalars()),
            session_expires_at=row.expires_at,
        )
