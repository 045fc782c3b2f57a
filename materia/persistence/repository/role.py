"""PostgreSQL implementation of Role repository."""

from collections import defaultdict
from typing import Optional

from sqlalchemy import delete, func, insert, select
from sqlalchemy.dialects.postgresql import insert as pg_insert

from materia.domain.model.role import Role
from materia.domain.repository import RoleRepository
from materia.domain.value import PermissionCode, RoleId
from materia.persistence.mappers import role_to_dict, row_to_role
from materia.persistence.repository.base import PostgresRepository
from materia.persistence.tables import (
    permissions_table,
    role_permissions_table,
    roles_table,
    user_roles_table,
)


class PostgresRoleRepository(PostgresRepository, RoleRepository):
    """PostgreSQL implementation of RoleRepository."""

    async def find_all(self) -> list[Role]:
        """Find all roles with their permissions, sorted by name."""
        result = await self._execute(select(roles_table).order_by(roles_table.c.name))
        rows = [row._asdict() for row in result]
        if not rows:
            return []

        permissions = await self._execute(
            select(role_permissions_table).where(
                role_permissions_table.c.role_id.in_([row["id"] for row in rows])
            )
        )
        codes: dict[RoleId, list[str]] = defaultdict(list)
        for row in permissions:
            codes[row.role_id].append(row.permission_code)

        return [row_to_role(row, codes[row["id"]]) for row in rows]

    async def find_by_id(self, role_id: RoleId, lock: bool = False) -> Optional[Role]:
        """Find role by ID with its permissions."""
        stmt = select(roles_table).where(roles_table.c.id == role_id)
        if lock:
            stmt = stmt.with_for_update()
        result = await self._execute(stmt)
        row = result.fetchone()
        if not row:
            return None

        permissions = await self._execute(
            select(role_permissions_table.c.permission_code).where(
                role_permissions_table.c.role_id == role_id
            )
        )
        return row_to_role(row._asdict(), list(permissions.scalars()))

    async def count(self) -> int:
        """Count existing roles."""
        result = await self._execute(select(func.count()).select_from(roles_table))
        return result.scalar_one()

    async def count_users(self, role_id: RoleId) -> int:
        """Count users holding a role."""
        stmt = (
            select(func.count())
            .select_from(user_roles_table)
            .where(user_roles_table.c.role_id == role_id)
        )
        result = await self._execute(stmt)
        return result.scalar_one()

    async def save(self, role: Role) -> Role:
        """Insert or update a role and replace its permissions."""
        stmt = pg_insert(roles_table).values(**role_to_dict(role))
        stmt = stmt.on_conflict_do_update(
            index_elements=[roles_table.c.id],
            set_={
                "name": stmt.excluded.name,
                "description": stmt.excluded.description,
                "updated_at": stmt.excluded.updated_at,
            },
        )
        await self._execute(stmt)

        await self._execute(
            delete(role_permissions_table).where(
                role_permissions_table.c.role_id == role.id
            )
        )
        if role.permission_codes:
            await self._execute(
                insert(role_permissions_table),
                [
                    {"role_id": role.id, "permission_code": code.value}
                    for code in role.permission_codes
                ],
            )
        return role

    async def delete(self, role_id: RoleId) -> None:
        """Delete a role. Its permission links cascade."""
        await self._execute(delete(roles_table).where(roles_table.c.id == role_id))

    async def find_all_permissions(self) -> list[PermissionCode]:
        """Find the seeded permission codes."""
        result = await self._execute(
            select(permissions_table.c.code).order_by(permissions_table.c.code)
        )
        return [PermissionCode(code) for code in result.scalars()]
