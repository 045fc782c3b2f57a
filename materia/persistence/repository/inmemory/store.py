"""Shared state behind the in-memory repositories."""

from dataclasses import dataclass, field

from materia.domain.model.actor import Actor
from materia.domain.model.characteristic import Characteristic
from materia.domain.model.file import StoredFile
from materia.domain.model.log import LogEntry
from materia.domain.model.material import Material
from materia.domain.model.material_history import MaterialHistory
from materia.domain.model.role import Role
from materia.domain.model.tag import Tag
from materia.domain.model.user import User
from materia.domain.value import (
    CharacteristicId,
    EntityId,
    FileId,
    MaterialId,
    PermissionCode,
    RoleId,
    TagId,
    UserId,
)


@dataclass
class InMemoryStore:
    """Tables of the in-memory database.

    Repositories share one store, so reference counts across aggregates
    (materials carrying a tag, users holding a role) behave like joins.
    """

    tags: dict[TagId, Tag] = field(default_factory=dict)
    characteristics: dict[CharacteristicId, Characteristic] = field(default_factory=dict)
    materials: dict[MaterialId, Material] = field(default_factory=dict)
    files: dict[FileId, StoredFile] = field(default_factory=dict)
    history: list[MaterialHistory] = field(default_factory=list)
    logs: list[LogEntry] = field(default_factory=list)
    roles: dict[RoleId, Role] = field(default_factory=dict)
    # Users holding each role, the source of User.role_ids
    role_users: dict[RoleId, set[UserId]] = field(default_factory=dict)
    users: dict[UserId, User] = field(default_factory=dict)
    entities: set[EntityId] = field(default_factory=set)
    permissions: list[PermissionCode] = field(
        default_factory=lambda: list(PermissionCode)
    )
    # Active sessions keyed by token
    sessions: dict[str, Actor] = field(default_factory=dict)
