"""Authenticated actor resolved from a session."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from materia.domain.model.common import DomainModel
from materia.domain.value import EntityId, PermissionCode, UserId


class Actor(DomainModel):
    """User behind a session, with the permissions granted by their roles.

    ``entity_id`` is the entity currently selected by the user; every query
    made on their behalf is scoped to it.
    """

    user_id: UserId
    name: str
    active: bool = True
    entity_id: EntityId
    permissions: frozenset[PermissionCode] = Field(default_factory=frozenset)
    session_expires_at: Optional[datetime] = None

    def has_permission(self, permission: PermissionCode) -> bool:
        return permission in self.permissions
