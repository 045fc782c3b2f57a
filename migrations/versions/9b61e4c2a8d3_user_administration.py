"""user_administration

- Soft delete of users
- Entities each user may select
- Tenant of stored files, so attachments can be served per entity

Revision ID: 9b61e4c2a8d3
Revises: 3f2c9a1d7b40
Create Date: 2026-10-19 09:41:07.552918

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "9b61e4c2a8d3"
down_revision: Union[str, Sequence[str], None] = "3f2c9a1d7b40"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.add_column(
        "users", sa.Column("deleted_at", sa.TIMESTAMP(timezone=True), nullable=True)
    )

    op.create_table(
        "user_entities",
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("entity_id", sa.UUID(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["entity_id"], ["entities.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("user_id", "entity_id"),
    )
    # Every existing user keeps access to the entity they have selected
    op.execute("""
        INSERT INTO user_entities (user_id, entity_id)
        SELECT id, entity_selected_id FROM users
    """)

    op.add_column("files", sa.Column("entity_id", sa.UUID(), nullable=True))
    # Stored paths start with materials/<material id>/
    op.execute("""
        UPDATE files SET entity_id = materials.entity_id
        FROM materials
        WHERE files.path LIKE 'materials/' || materials.id::text || '/%'
    """)
    op.execute("DELETE FROM files WHERE entity_id IS NULL")
    op.alter_column("files", "entity_id", nullable=False)
    op.create_foreign_key(
        "fk_files_entity_id", "files", "entities", ["entity_id"], ["id"]
    )
    op.create_index("idx_files_entity_id", "files", ["entity_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_files_entity_id", table_name="files")
    op.drop_constraint("fk_files_entity_id", "files", type_="foreignkey")
    op.drop_column("files", "entity_id")
    op.drop_table("user_entities")
    op.drop_column("users", "deleted_at")
