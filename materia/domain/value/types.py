"""Domain enumerations for Materia.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum
from typing import Annotated

from pydantic import StringConstraints


class CharacteristicType(str, Enum):
    """Closed set of characteristic types.

    Values match the identifiers stored in the database and sent by clients.
    """

    TEXT = "text"
    TEXTAREA = "textarea"
    LINK = "link"
    EMAIL = "email"
    NUMBER = "number"
    FLOAT = "float"
    MULTI_TEXT = "multiText"
    MULTI_TEXT_AREA = "multiTextArea"
    MULTI_SELECT = "multiSelect"
    SELECT = "select"
    CHECKBOX = "checkbox"
    RADIO = "radio"
    BOOLEAN = "boolean"
    DATE = "date"
    DATE_HOUR = "dateHour"
    DATE_RANGE = "dateRange"
    DATE_HOUR_RANGE = "dateHourRange"
    FILE = "file"

    @property
    def is_numeric(self) -> bool:
        """Whether values of this type carry units."""
        return self in (CharacteristicType.NUMBER, CharacteristicType.FLOAT)


class VariantGroup(str, Enum):
    """Value-shape family a characteristic type belongs to."""

    SCALAR = "scalar"
    MULTI_TEXT = "multiText"
    CHOICE = "choice"
    BOOLEAN = "boolean"
    DATE = "date"
    DATE_RANGE = "dateRange"
    FILE = "file"


class PermissionCode(str, Enum):
    """Permission codes seeded in the database."""

    USER_CREATE = "user_create"
    USER_READ = "user_read"
    USER_EDIT = "user_edit"
    ROLE_CREATE = "role_create"
    ROLE_READ = "role_read"
    ROLE_EDIT = "role_edit"
    LOG_READ = "log_read"
    TAG_CREATE = "tag_create"
    TAG_READ = "tag_read"
    TAG_EDIT = "tag_edit"
    CHARACTERISTIC_CREATE = "characteristic_create"
    CHARACTERISTIC_READ = "characteristic_read"
    CHARACTERISTIC_EDIT = "characteristic_edit"
    MATERIAL_CREATE = "material_create"
    MATERIAL_READ = "material_read"
    MATERIAL_EDIT = "material_edit"


class LogType(str, Enum):
    """Audit log entry types."""

    USER_CREATE = "user_create"
    USER_UPDATE = "user_update"
    USER_SET_ROLE = "user_set_role"
    USER_SET_ENTITY = "user_set_entity"
    USER_DISABLE = "user_disable"
    ROLE_CREATE = "role_create"
    ROLE_UPDATE = "role_update"
    ROLE_DELETE = "role_delete"
    ROLE_SET_PERMISSION = "role_set_permission"
    TAG_CREATE = "tag_create"
    TAG_UPDATE = "tag_update"
    TAG_DELETE = "tag_delete"
    CHARACTERISTIC_CREATE = "characteristic_create"
    CHARACTERISTIC_UPDATE = "characteristic_update"
    CHARACTERISTIC_DELETE = "characteristic_delete"
    MATERIAL_CREATE = "material_create"
    MATERIAL_UPDATE = "material_update"
    MATERIAL_DELETE = "material_delete"

    @property
    def subject(self) -> str:
        """Key under which the subject is recorded in the entry info."""
        return self.value.split("_", 1)[0]


# Name of the role that can be neither modified nor deleted
SUPER_ADMIN_ROLE_NAME = "Super Admin"


# Display name of tags, characteristics, materials and roles (trimmed)
Name = Annotated[str, StringConstraints(strip_whitespace=True, min_length=2, max_length=64)]

Description = Annotated[str, StringConstraints(strip_whitespace=True, max_length=255)]

# CSS hex colour including the leading '#'
HexColor = Annotated[
    str, StringConstraints(min_length=7, max_length=7, pattern=r"^#[0-9a-fA-F]{6}$")
]

# Lowercased, with a single '@' and a dotted domain
Email = Annotated[
    str,
    StringConstraints(
        strip_whitespace=True,
        to_lower=True,
        max_length=255,
        pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$",
    ),
]
