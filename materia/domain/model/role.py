"""Role entity grouping permissions."""

from datetime import datetime

from pydantic import Field

from materia.domain.model.common import DomainInput, DomainModel
from materia.domain.value import (
    SUPER_ADMIN_ROLE_NAME,
    Description,
    Name,
    PermissionCode,
    RoleId,
)


class Role(DomainModel):
    """Named set of permissions assigned to users.

    Roles are global, not scoped to an entity.
    """

    id: RoleId
    name: str = Field(min_length=2, max_length=64)
    description: str = Field(default="", max_length=255)
    permission_codes: list[PermissionCode] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_super_admin(self) -> bool:
        return self.name == SUPER_ADMIN_ROLE_NAME


class RoleData(DomainInput):
    """Data sent to create or update a role."""

    name: Name
    description: Description = ""


class PermissionAssignment(DomainInput):
    """Complete set of permissions granted to a role."""

    permission_codes: list[PermissionCode] = Field(alias="permissionCodes")
