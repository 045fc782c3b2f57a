"""Role response items."""

from datetime import datetime

from pydantic import BaseModel

from materia.domain.model.role import Role
from materia.domain.value import PermissionCode


class RoleItem(BaseModel):
    """Role in responses."""

    id: str
    name: str
    description: str
    permission_codes: list[PermissionCode]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, role: Role) -> "RoleItem":
        return cls(
            id=str(role.id),
            name=role.name,
            description=role.description,
            permission_codes=role.permission_codes,
            created_at=role.created_at,
            updated_at=role.updated_at,
        )
