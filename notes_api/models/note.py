"""
Notes API — Note SQLAlchemy Model
===================================

What:  ORM model representing the `notes` table.
Why:   Maps Python objects to database rows for type-safe database operations.
How:   Inherits from DeclarativeBase; Alembic reads this for migrations.
Who:   Used by NoteStore for CRUD operations and by Alembic for schema management.

Table Design Rationale:
    - UUID primary key: opaque to clients, assigned on insert, never reused
    - title: short label, defaulted by the service before it reaches the table
    - content: the note body; NOT NULL, and the service rejects empty strings
    - created_at / updated_at: UTC with timezone, created_at never mutated

    Index on created_at:
        Listing returns notes in insertion order, which is created_at ascending.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import TypeDecorator

from notes_api.database import Base


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class UTCDateTime(TypeDecorator):
    """
    Timezone-aware timestamp that always comes back in UTC.

    PostgreSQL returns aware datetimes already; SQLite drops the offset, so
    naive values read back are tagged as UTC.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return value
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    def process_result_value(self, value, dialect):
        if value is None:
            return value
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class Note(Base):
    """
    A single persisted note.

    Lifecycle:
        1. Created by NoteService.create (id and both timestamps assigned here)
        2. Replaced by NoteService.update (title/content overwritten, updated_at refreshed)
        3. Removed by NoteService.delete (hard delete, no tombstone)
    """

    __tablename__ = "notes"

    # Generic Uuid type: native UUID on PostgreSQL, CHAR(32) on SQLite
    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        comment="Opaque note identifier",
    )

    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        default="Untitled Note",
        comment="Note title; 'Untitled Note' when the client sends none",
    )

    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Note body; never empty",
    )

    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        nullable=False,
        default=utc_now,
        comment="When this note was created (UTC)",
    )

    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        nullable=False,
        default=utc_now,
        comment="When this note was last written (UTC)",
    )

    __table_args__ = (
        Index("idx_notes_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title='{self.title}', updated_at='{self.updated_at}')>"
