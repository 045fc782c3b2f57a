"""Domain model entities for Materia."""

from materia.domain.model.actor import Actor
from materia.domain.model.characteristic import (
    Characteristic,
    CharacteristicChanges,
    CharacteristicWithCount,
    NewCharacteristic,
)
from materia.domain.model.file import FileReference, FileSnapshot, FileUpload, StoredFile
from materia.domain.model.log import LogEntry
from materia.domain.model.material import (
    CharacteristicValueInput,
    Material,
    MaterialCharacteristic,
    MaterialData,
)
from materia.domain.model.material_history import MaterialHistory, TagSnapshot
from materia.domain.model.role import PermissionAssignment, Role, RoleData
from materia.domain.model.tag import Tag, TagData, TagWithCount
from materia.domain.model.user import (
    EntitySelection,
    NewUser,
    RoleAssignment,
    User,
    UserChanges,
)

__all__ = [
    "Actor",
    "Characteristic",
    "CharacteristicChanges",
    "CharacteristicWithCount",
    "NewCharacteristic",
    "FileReference",
    "FileSnapshot",
    "FileUpload",
    "StoredFile",
    "LogEntry",
    "CharacteristicValueInput",
    "Material",
    "MaterialCharacteristic",
    "MaterialData",
    "MaterialHistory",
    "TagSnapshot",
    "PermissionAssignment",
    "Role",
    "RoleData",
    "Tag",
    "TagData",
    "TagWithCount",
    "EntitySelection",
    "NewUser",
    "RoleAssignment",
    "User",
    "UserChanges",
]
