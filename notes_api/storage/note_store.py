"""
Notes API — Note Store
========================

What:  Storage access for the single `notes` collection.
Why:   Keeps SQLAlchemy queries out of NoteService. The service receives a
       store when it is built and never touches the session directly.
How:   Wraps one AsyncSession. Every write commits before it returns, so a
       note handed back to the caller is already durable.

Errors:
    SQLAlchemy exceptions propagate unchanged, commit failures included.
    NoteService decides how each one surfaces to the client; the session
    dependency rolls the transaction back.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from notes_api.models.note import Note, utc_now


class NoteStore:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def insert(self, title: str, content: str) -> Note:
        now = utc_now()
        note = Note(title=title, content=content, created_at=now, updated_at=now)
        self.session.add(note)
        await self.session.commit()
        return note

    async def find_all(self) -> List[Note]:
        # created_at ascending is insertion order; id keeps ties deterministic
        result = await self.session.execute(
            select(Note).order_by(Note.created_at, Note.id)
        )
        return list(result.scalars().all())

    async def find_by_id(self, note_id: UUID) -> Optional[Note]:
        result = await self.session.execute(select(Note).where(Note.id == note_id))
        return result.scalar_one_or_none()

    async def replace(self, note: Note, title: str, content: str) -> Note:
        """Overwrite title and content, moving updated_at forward."""
        note.title = title
        note.content = content
        note.updated_at = _later_of(utc_now(), note.updated_at)
        await self.session.commit()
        return note

    async def delete(self, note: Note) -> None:
        await self.session.delete(note)
        await self.session.commit()


def _later_of(now: datetime, previous: datetime) -> datetime:
    # A clock step backwards must not break created_at <= updated_at
    return now if now >= previous else previous
