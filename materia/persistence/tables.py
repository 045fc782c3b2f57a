"""SQLAlchemy table definitions for Materia.

These table definitions are used with SQLAlchemy Core and manual mappers.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS & SESSIONS (sessions are written by the authentication service)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("name", String(255), nullable=False),
    Column("email", String(255), nullable=False, unique=True),
    Column("active", Boolean, nullable=False, server_default="true"),
    # Entity currently selected by the user
    Column("entity_selected_id", UUID, ForeignKey("entities.id"), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),  # Soft delete
)

sessions_table = Table(
    "sessions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("token", String(255), nullable=False, unique=True),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=False),
)

Index("idx_sessions_user_id", sessions_table.c.user_id)

entities_table = Table(
    "entities",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("name", String(255), nullable=False),
)

# Entities a user may select
user_entities_table = Table(
    "user_entities",
    metadata,
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "entity_id", UUID, ForeignKey("entities.id", ondelete="CASCADE"), nullable=False
    ),
    PrimaryKeyConstraint("user_id", "entity_id"),
)

# ============================================================================
# ROLES & PERMISSIONS
# ============================================================================
roles_table = Table(
    "roles",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("name", String(64), nullable=False, unique=True),
    Column("description", String(255), nullable=False, server_default=""),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

permissions_table = Table(
    "permissions",
    metadata,
    Column("code", String(64), primary_key=True),
)

role_permissions_table = Table(
    "role_permissions",
    metadata,
    Column("role_id", UUID, ForeignKey("roles.id", ondelete="CASCADE"), nullable=False),
    Column(
        "permission_code",
        String(64),
        ForeignKey("permissions.code", ondelete="CASCADE"),
        nullable=False,
    ),
    PrimaryKeyConstraint("role_id", "permission_code"),
)

user_roles_table = Table(
    "user_roles",
    metadata,
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("role_id", UUID, ForeignKey("roles.id", ondelete="RESTRICT"), nullable=False),
    PrimaryKeyConstraint("user_id", "role_id"),
)

Index("idx_user_roles_role_id", user_roles_table.c.role_id)

# ============================================================================
# TAGS TABLE
# ============================================================================
tags_table = Table(
    "tags",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("entity_id", UUID, ForeignKey("entities.id"), nullable=False),
    Column("name", String(64), nullable=False),
    Column("color", String(7), nullable=False),
    Column("font_color", String(7), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_tags_entity_name", tags_table.c.entity_id, tags_table.c.name)

# ============================================================================
# CHARACTERISTICS TABLE
# ============================================================================
characteristics_table = Table(
    "characteristics",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("entity_id", UUID, ForeignKey("entities.id"), nullable=False),
    Column("name", String(64), nullable=False),
    Column("description", String(255), nullable=False, server_default=""),
    Column("type", String(32), nullable=False),
    Column("options", JSONB, nullable=True),  # List of strings for choice types
    Column("units", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_characteristics_entity_name",
    characteristics_table.c.entity_id,
    characteristics_table.c.name,
)

# ============================================================================
# MATERIALS TABLE
# ============================================================================
materials_table = Table(
    "materials",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("entity_id", UUID, ForeignKey("entities.id"), nullable=False),
    Column("name", String(64), nullable=False),
    Column("description", String(255), nullable=False, server_default=""),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),  # Soft delete
)

Index(
    "idx_materials_entity_active",
    materials_table.c.entity_id,
    materials_table.c.updated_at.desc(),
    postgresql_where=materials_table.c.deleted_at.is_(None),
)

material_tags_table = Table(
    "material_tags",
    metadata,
    Column(
        "material_id",
        UUID,
        ForeignKey("materials.id", ondelete="CASCADE"),
        nullable=False,
    ),
    # RESTRICT: a tag carried by any material, deleted or not, cannot go
    Column("tag_id", UUID, ForeignKey("tags.id", ondelete="RESTRICT"), nullable=False),
    Column("position", Integer, nullable=False, server_default="0"),
    PrimaryKeyConstraint("material_id", "tag_id"),
)

Index("idx_material_tags_tag_id", material_tags_table.c.tag_id)

material_characteristics_table = Table(
    "material_characteristics",
    metadata,
    Column(
        "material_id",
        UUID,
        ForeignKey("materials.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "characteristic_id",
        UUID,
        ForeignKey("characteristics.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("position", Integer, nullable=False),  # Display order
    Column("value", JSONB, nullable=True),  # Self-describing value shape
    PrimaryKeyConstraint("material_id", "characteristic_id"),
)

Index(
    "idx_material_characteristics_characteristic_id",
    material_characteristics_table.c.characteristic_id,
)

# ============================================================================
# FILES TABLE
# ============================================================================
files_table = Table(
    "files",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("entity_id", UUID, ForeignKey("entities.id"), nullable=False),
    Column("name", String(255), nullable=False),
    Column("type", String(255), nullable=False),  # MIME type
    Column("path", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_files_entity_id", files_table.c.entity_id)

# ============================================================================
# MATERIAL HISTORY TABLE (append-only)
# ============================================================================
material_history_table = Table(
    "material_history",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "material_id",
        UUID,
        ForeignKey("materials.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("name", String(64), nullable=False),
    Column("description", String(255), nullable=False, server_default=""),
    Column("tags", JSONB, nullable=False),
    Column("characteristics", JSONB, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_material_history_material_created",
    material_history_table.c.material_id,
    material_history_table.c.created_at.desc(),
)

# ============================================================================
# LOGS TABLE
# ============================================================================
logs_table = Table(
    "logs",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("type", String(64), nullable=False),
    Column("info", JSONB, nullable=False),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="SET NULL"), nullable=True),
    Column("entity_id", UUID, ForeignKey("entities.id"), nullable=True),
    Column(
        "action_date", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_logs_action_date", logs_table.c.action_date.desc())
Index("idx_logs_entity_id", logs_table.c.entity_id)
