"""initial_schema

Create the schema for Materia:
- Entities, users and sessions (written by the authentication service)
- Roles and permissions
- Tags, characteristics and materials (scoped per entity)
- Files attached to file characteristics
- Material history snapshots (append-only)
- Audit logs

Seeds the permission codes and the Super Admin role.

Revision ID: 3f2c9a1d7b40
Revises:
Create Date: 2026-10-18 10:12:44.318204

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f2c9a1d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


PERMISSION_CODES = [
    "user_create",
    "user_read",
    "user_edit",
    "role_create",
    "role_read",
    "role_edit",
    "log_read",
    "tag_create",
    "tag_read",
    "tag_edit",
    "characteristic_create",
    "characteristic_read",
    "characteristic_edit",
    "material_create",
    "material_read",
    "material_edit",
]


def _id_column() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("gen_random_uuid()"),
        nullable=False,
    )


def _timestamp_column(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def upgrade() -> None:
    """Upgrade schema."""
    # gen_random_uuid() on PostgreSQL < 13
    op.execute('CREATE EXTENSION IF NOT EXISTS "pgcrypto"')

    # ========================================================================
    # ENTITIES, USERS, SESSIONS
    # ========================================================================
    op.create_table(
        "entities",
        _id_column(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "users",
        _id_column(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("active", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("entity_selected_id", sa.UUID(), nullable=False),
        _timestamp_column("created_at"),
        sa.ForeignKeyConstraint(["entity_selected_id"], ["entities.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_users_email"),
    )

    op.create_table(
        "sessions",
        _id_column(),
        sa.Column("token", sa.String(255), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("expires_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("token", name="uq_sessions_token"),
    )
    op.create_index("idx_sessions_user_id", "sessions", ["user_id"])

    # ========================================================================
    # ROLES & PERMISSIONS
    # ========================================================================
    op.create_table(
        "roles",
        _id_column(),
        sa.Column("name", sa.String(64), nullable=False),
        sa.Column("description", sa.String(255), nullable=False, server_default=""),
        _timestamp_column("created_at"),
        _timestamp_column("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name", name="uq_roles_name"),
    )

    op.create_table(
        "permissions",
        sa.Column("code", sa.String(64), nullable=False),
        sa.PrimaryKeyConstraint("code"),
    )

    op.create_table(
        "role_permissions",
        sa.Column("role_id", sa.UUID(), nullable=False),
        sa.Column("permission_code", sa.String(64), nullable=False),
        sa.ForeignKeyConstraint(["role_id"], ["roles.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["permission_code"], ["permissions.code"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("role_id", "permission_code"),
    )

    op.create_table(
        "user_roles",
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("role_id", sa.UUID(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["role_id"], ["roles.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("user_id", "role_id"),
    )
    op.create_index("idx_user_roles_role_id", "user_roles", ["role_id"])

    # ========================================================================
    # TAGS & CHARACTERISTICS
    # ========================================================================
    op.create_table(
        "tags",
        _id_column(),
        sa.Column("entity_id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(64), nullable=False),
        sa.Column("color", sa.String(7), nullable=False),
        sa.Column("font_color", sa.String(7), nullable=False),
        _timestamp_column("created_at"),
        _timestamp_column("updated_at"),
        sa.ForeignKeyConstraint(["entity_id"], ["entities.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_tags_entity_name", "tags", ["entity_id", "name"])

    op.create_table(
        "characteristics",
        _id_column(),
        sa.Column("entity_id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(64), nullable=False),
        sa.Column("description", sa.String(255), nullable=False, server_default=""),
        sa.Column("type", sa.String(32), nullable=False),
        sa.Column("options", postgresql.JSONB(), nullable=True),
        sa.Column("units", sa.Text(), nullable=True),
        _timestamp_column("created_at"),
        _timestamp_column("updated_at"),
        sa.ForeignKeyConstraint(["entity_id"], ["entities.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_characteristics_entity_name", "characteristics", ["entity_id", "name"]
    )

    # ========================================================================
    # MATERIALS
    # ========================================================================
    op.create_table(
        "materials",
        _id_column(),
        sa.Column("entity_id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(64), nullable=False),
        sa.Column("description", sa.String(255), nullable=False, server_default=""),
        _timestamp_column("created_at"),
        _timestamp_column("updated_at"),
        sa.Column("deleted_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["entity_id"], ["entities.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_materials_entity_active",
        "materials",
        ["entity_id", sa.text("updated_at DESC")],
        postgresql_where=sa.text("deleted_at IS NULL"),
    )

    op.create_table(
        "material_tags",
        sa.Column("material_id", sa.UUID(), nullable=False),
        sa.Column("tag_id", sa.UUID(), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False, server_default="0"),
        sa.ForeignKeyConstraint(["material_id"], ["materials.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["tag_id"], ["tags.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("material_id", "tag_id"),
    )
    op.create_index("idx_material_tags_tag_id", "material_tags", ["tag_id"])

    op.create_table(
        "material_characteristics",
        sa.Column("material_id", sa.UUID(), nullable=False),
        sa.Column("characteristic_id", sa.UUID(), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("value", postgresql.JSONB(), nullable=True),
        sa.ForeignKeyConstraint(["material_id"], ["materials.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["characteristic_id"], ["characteristics.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("material_id", "characteristic_id"),
    )
    op.create_index(
        "idx_material_characteristics_characteristic_id",
        "material_characteristics",
        ["characteristic_id"],
    )

    # ========================================================================
    # FILES, HISTORY, LOGS
    # ========================================================================
    op.create_table(
        "files",
        _id_column(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("type", sa.String(255), nullable=False),
        sa.Column("path", sa.Text(), nullable=False),
        _timestamp_column("created_at"),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "material_history",
        _id_column(),
        sa.Column("material_id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(64), nullable=False),
        sa.Column("description", sa.String(255), nullable=False, server_default=""),
        sa.Column("tags", postgresql.JSONB(), nullable=False),
        sa.Column("characteristics", postgresql.JSONB(), nullable=False),
        _timestamp_column("created_at"),
        sa.ForeignKeyConstraint(["material_id"], ["materials.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_material_history_material_created",
        "material_history",
        ["material_id", sa.text("created_at DESC")],
    )

    op.create_table(
        "logs",
        _id_column(),
        sa.Column("type", sa.String(64), nullable=False),
        sa.Column("info", postgresql.JSONB(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=True),
        sa.Column("entity_id", sa.UUID(), nullable=True),
        _timestamp_column("action_date"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["entity_id"], ["entities.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_logs_action_date", "logs", [sa.text("action_date DESC")])
    op.create_index("idx_logs_entity_id", "logs", ["entity_id"])

    # ========================================================================
    # SEED DATA
    # ========================================================================
    permissions = sa.table("permissions", sa.column("code", sa.String))
    op.bulk_insert(permissions, [{"code": code} for code in PERMISSION_CODES])

    op.execute("""
        INSERT INTO roles (name, description)
        VALUES ('Super Admin', 'Holds every permission')
    """)
    op.execute("""
        INSERT INTO role_permissions (role_id, permission_code)
        SELECT r.id, p.code
        FROM roles r CROSS JOIN permissions p
        WHERE r.name = 'Super Admin'
    """)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("logs")
    op.drop_table("material_history")
    op.drop_table("files")
    op.drop_table("material_characteristics")
    op.drop_table("material_tags")
    op.drop_table("materials")
    op.drop_table("characteristics")
    op.drop_table("tags")
    op.drop_table("user_roles")
    op.drop_table("role_permissions")
    op.drop_table("permissions")
    op.drop_table("roles")
    op.drop_table("sessions")
    op.drop_table("users")
    op.drop_table("entities")
