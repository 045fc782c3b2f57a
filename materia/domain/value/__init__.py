"""Domain value objects for Materia."""

from materia.domain.value.identifiers import (
    CharacteristicId,
    EntityId,
    FileId,
    LogId,
    MaterialHistoryId,
    MaterialId,
    RoleId,
    TagId,
    UserId,
)
from materia.domain.value.types import (
    SUPER_ADMIN_ROLE_NAME,
    CharacteristicType,
    Description,
    Email,
    HexColor,
    LogType,
    Name,
    PermissionCode,
    VariantGroup,
)

__all__ = [
    # Identifiers
    "EntityId",
    "UserId",
    "CharacteristicId",
    "TagId",
    "MaterialId",
    "MaterialHistoryId",
    "FileId",
    "RoleId",
    "LogId",
    # Types
    "CharacteristicType",
    "VariantGroup",
    "PermissionCode",
    "LogType",
    "SUPER_ADMIN_ROLE_NAME",
    "Name",
    "Description",
    "Email",
    "HexColor",
]
