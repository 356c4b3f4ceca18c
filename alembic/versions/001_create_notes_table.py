"""Create notes table

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates the `notes` table holding every Note document.
How:   Generic Uuid / timezone-aware DateTime types, so the same migration
       runs on PostgreSQL and SQLite.

Rollback: downgrade() drops the table entirely (all notes are lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "notes",
        sa.Column("id", sa.Uuid(), nullable=False, comment="Opaque note identifier"),
        sa.Column(
            "title",
            sa.String(255),
            nullable=False,
            comment="Note title; 'Untitled Note' when the client sends none",
        ),
        sa.Column("content", sa.Text(), nullable=False, comment="Note body; never empty"),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            comment="When this note was created (UTC)",
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            comment="When this note was last written (UTC)",
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    # Listing returns notes in insertion order (created_at ascending)
    op.create_index("idx_notes_created_at", "notes", ["created_at"])


def downgrade() -> None:
    op.drop_index("idx_notes_created_at", table_name="notes")
    op.drop_table("notes")
