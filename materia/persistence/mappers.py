"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping. Characteristic values
are stored as self-describing JSON (with their ``kind``), dumped by alias.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from materia.domain.model import (
    Characteristic,
    CharacteristicWithCount,
    LogEntry,
    Material,
    MaterialCharacteristic,
    MaterialHistory,
    Role,
    StoredFile,
    Tag,
    TagWithCount,
    User,
)
from materia.domain.model.characteristic_value import live_value_adapter
from materia.domain.value import (
    CharacteristicId,
    CharacteristicType,
    EntityId,
    FileId,
    LogId,
    LogType,
    MaterialHistoryId,
    MaterialId,
    PermissionCode,
    RoleId,
    TagId,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model.

    Args:
        row: Database row as dict

    Returns:
        Tag domain model
    """
    return Tag(
        id=TagId(_uuid(row["id"])),
        entity_id=EntityId(_uuid(row["entity_id"])),
        name=row["name"],
        color=row["color"],
        font_color=row["font_color"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def row_to_tag_with_count(row: Dict[str, Any]) -> TagWithCount:
    """Convert database row with a ``material_count`` column."""
    return TagWithCount(
        **row_to_tag(row).model_dump(), material_count=row["material_count"] or 0
    )


def tag_to_dict(tag: Tag) -> Dict[str, Any]:
    """Convert Tag domain model to database dict."""
    return tag.model_dump()


def row_to_characteristic(row: Dict[str, Any]) -> Characteristic:
    """Convert database row to Characteristic domain model.

    Args:
        row: Database row as dict

    Returns:
        Characteristic domain model
    """
    return Characteristic(
        id=CharacteristicId(_uuid(row["id"])),
        entity_id=EntityId(_uuid(row["entity_id"])),
        name=row["name"],
        description=row["description"],
        type=CharacteristicType(row["type"]),
        options=row.get("options"),
        units=row.get("units"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def row_to_characteristic_with_count(row: Dict[str, Any]) -> CharacteristicWithCount:
    """Convert database row with a ``material_count`` column."""
    return CharacteristicWithCount(
        **row_to_characteristic(row).model_dump(),
        material_count=row["material_count"] or 0,
    )


def characteristic_to_dict(characteristic: Characteristic) -> Dict[str, Any]:
    """Convert Characteristic domain model to database dict."""
    data = characteristic.model_dump()
    data["type"] = characteristic.type.value
    return data


def row_to_material(
    row: Dict[str, Any],
    tag_ids: list[TagId],
    characteristics: list[MaterialCharacteristic],
) -> Material:
    """Convert database row and its relations to Material domain model.

    Args:
        row: Material row as dict
        tag_ids: Tags of the material, in order
        characteristics: Characteristic values, in display order

    Returns:
        Material domain model
    """
    return Material(
        id=MaterialId(_uuid(row["id"])),
        entity_id=EntityId(_uuid(row["entity_id"])),
        name=row["name"],
        description=row["description"],
        tag_ids=tag_ids,
        characteristics=characteristics,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        deleted_at=row.get("deleted_at"),
    )


def material_to_dict(material: Material) -> Dict[str, Any]:
    """Convert Material domain model to a materials row (without relations)."""
    return material.model_dump(exclude={"tag_ids", "characteristics"})


def row_to_material_characteristic(row: Dict[str, Any]) -> MaterialCharacteristic:
    """Convert a material_characteristics row."""
    value = row.get("value")
    return MaterialCharacteristic(
        characteristic_id=CharacteristicId(_uuid(row["characteristic_id"])),
        value=live_value_adapter.validate_python(value) if value is not None else None,
    )


def value_to_json(mc: MaterialCharacteristic) -> Optional[Dict[str, Any]]:
    """Dump a characteristic value as self-describing JSON.

    Pending uploads and deletions are never persisted.
    """
    if mc.value is None:
        return None
    return mc.value.model_dump(
        mode="json", by_alias=True, exclude={"file_to_add", "file_to_delete"}
    )


def row_to_stored_file(row: Dict[str, Any]) -> StoredFile:
    """Convert database row to StoredFile domain model."""
    return StoredFile(
        id=FileId(_uuid(row["id"])),
        entity_id=EntityId(_uuid(row["entity_id"])),
        name=row["name"],
        type=row["type"],
        path=row["path"],
        created_at=row["created_at"],
    )


def row_to_material_history(row: Dict[str, Any]) -> MaterialHistory:
    """Convert database row to MaterialHistory domain model.

    Args:
        row: Database row as dict, tags and characteristics as JSON

    Returns:
        MaterialHistory domain model
    """
    return MaterialHistory.model_validate(
        {
            "id": MaterialHistoryId(_uuid(row["id"])),
            "material_id": MaterialId(_uuid(row["material_id"])),
            "name": row["name"],
            "description": row["description"],
            "tags": row["tags"],
            "characteristics": row["characteristics"],
            "created_at": row["created_at"],
        }
    )


def material_history_to_dict(history: MaterialHistory) -> Dict[str, Any]:
    """Convert MaterialHistory domain model to database dict."""
    data = history.model_dump(exclude={"tags", "characteristics"})
    data["tags"] = [t.model_dump(mode="json", by_alias=True) for t in history.tags]
    data["characteristics"] = [
        c.model_dump(mode="json", by_alias=True) for c in history.characteristics
    ]
    return data


def row_to_log_entry(row: Dict[str, Any]) -> LogEntry:
    """Convert database row to LogEntry domain model."""
    return LogEntry(
        id=LogId(_uuid(row["id"])),
        type=LogType(row["type"]),
        info=row["info"],
        user_id=UserId(_uuid(row["user_id"])) if row.get("user_id") else None,
        entity_id=EntityId(_uuid(row["entity_id"])) if row.get("entity_id") else None,
        action_date=row["action_date"],
    )


def log_entry_to_dict(entry: LogEntry) -> Dict[str, Any]:
    """Convert LogEntry domain model to database dict."""
    data = entry.model_dump()
    data["type"] = entry.type.value
    return data


def row_to_role(row: Dict[str, Any], permission_codes: list[str]) -> Role:
    """Convert database row and its permission codes to Role domain model."""
    return Role(
        id=RoleId(_uuid(row["id"])),
        name=row["name"],
        description=row["description"],
        permission_codes=sorted(PermissionCode(code) for code in permission_codes),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def role_to_dict(role: Role) -> Dict[str, Any]:
    """Convert Role domain model to a roles row (without permissions)."""
    return role.model_dump(exclude={"permission_codes"})


def row_to_user(
    row: Dict[str, Any], entity_ids: list[UUID], role_ids: list[UUID]
) -> User:
    """Convert database row and its links to User domain model."""
    return User(
        id=UserId(_uuid(row["id"])),
        name=row["name"],
        email=row["email"],
        active=row["active"],
        entity_selected_id=EntityId(_uuid(row["entity_selected_id"])),
        entity_ids=[EntityId(_uuid(e)) for e in entity_ids],
        role_ids=[RoleId(_uuid(r)) for r in role_ids],
        created_at=row["created_at"],
        deleted_at=row.get("deleted_at"),
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to a users row (without its links)."""
    return user.model_dump(exclude={"entity_ids", "role_ids"})
