"""
Notes API — Note Service (CRUD Handlers)
==========================================

What:  The five note operations: create, list_all, get_one, update, delete.
Why:   Encapsulates validation and error mapping, independent of HTTP concerns.
How:   Works against a NoteStore handed in at construction time.
Who:   Built per request by the `get_note_service` dependency; called by routes.

Error Handling Strategy:
    Every operation either returns a result or raises exactly one of:
        ValidationError  → content missing or empty
        NotFoundError    → no note with that id, or the id is not a UUID
        StoreError       → anything the store raised
    Each operation is attempted once; there are no retries.
"""

import logging
from typing import List, Optional
from uuid import UUID

from notes_api.exceptions import NotesApiError, NotFoundError, StoreError, ValidationError
from notes_api.models.note import Note
from notes_api.schemas.note import DEFAULT_TITLE, MessageResponse, NotePayload, NoteResponse
from notes_api.storage.note_store import NoteStore

logger = logging.getLogger(__name__)

DELETED_MESSAGE = "Note deleted successfully!"
EMPTY_CONTENT_MESSAGE = "Note content can not be empty"


class NoteService:
    """
    Request handlers for the Note collection.

    The service holds no state beyond its store, so a fresh instance per
    request is cheap and keeps each request on its own session.
    """

    def __init__(self, store: NoteStore):
        self.store = store

    async def create(self, payload: NotePayload) -> NoteResponse:
        """
        Validate and persist a new note.

        Raises:
            ValidationError: content missing or empty (nothing is written)
            StoreError: the insert failed
        """
        content = _require_content(payload)
        title = _title_or_default(payload)

        try:
            note = await self.store.insert(title=title, content=content)
        except Exception as e:
            raise _store_failure("Some error occurred while creating the Note.", e)

        logger.info("Note created: %s", note.id)
        return NoteResponse.model_validate(note)

    async def list_all(self) -> List[NoteResponse]:
        """All notes in insertion order. An empty store gives an empty list."""
        try:
            notes = await self.store.find_all()
        except Exception as e:
            raise _store_failure("Some error occurred while retrieving notes.", e)

        return [NoteResponse.model_validate(note) for note in notes]

    async def get_one(self, note_id: str) -> NoteResponse:
        """
        Fetch one note.

        Raises:
            NotFoundError: unknown id, or an id that is not a UUID
            StoreError: the lookup failed
        """
        note = await self._load(note_id, "Error retrieving note with id %s")
        return NoteResponse.model_validate(note)

    async def update(self, note_id: str, payload: NotePayload) -> NoteResponse:
        """
        Replace title and content of an existing note.

        Content is checked before the lookup, so an empty content is a 400
        even for an id that exists. id and created_at are never touched.

        Raises:
            ValidationError: content missing or empty (store unchanged)
            NotFoundError: unknown or malformed id
            StoreError: the lookup or write failed
        """
        content = _require_content(payload)
        title = _title_or_default(payload)

        note = await self._load(note_id, "Error updating note with id %s")
        try:
            note = await self.store.replace(note, title=title, content=content)
        except Exception as e:
            raise _store_failure(f"Error updating note with id {note_id}", e)

        logger.info("Note updated: %s", note.id)
        return NoteResponse.model_validate(note)

    async def delete(self, note_id: str) -> MessageResponse:
        """
        Permanently remove a note.

        Raises:
            NotFoundError: unknown or malformed id
            StoreError: the lookup or delete failed
        """
        note = await self._load(note_id, "Could not delete note with id %s")
        try:
            await self.store.delete(note)
        except Exception as e:
            raise _store_failure(f"Could not delete note with id {note_id}", e)

        logger.info("Note deleted: %s", note_id)
        return MessageResponse(message=DELETED_MESSAGE)

    async def _load(self, note_id: str, failure_message: str) -> Note:
        parsed = _parse_id(note_id)
        if parsed is None:
            # Malformed ids answer exactly like unknown ones
            raise NotFoundError(resource="Note", resource_id=note_id)

        try:
            note = await self.store.find_by_id(parsed)
        except Exception as e:
            raise _store_failure(failure_message % note_id, e)

        if note is None:
            raise NotFoundError(resource="Note", resource_id=note_id)
        return note


def _parse_id(note_id: str) -> Optional[UUID]:
    try:
        return UUID(str(note_id))
    except ValueError:
        return None


def _require_content(payload: NotePayload) -> str:
    if not payload.content:
        raise ValidationError(message=EMPTY_CONTENT_MESSAGE, field="content")
    return payload.content


def _title_or_default(payload: NotePayload) -> str:
    return payload.title or DEFAULT_TITLE


def _store_failure(message: str, error: Exception) -> NotesApiError:
    if isinstance(error, NotesApiError):
        return error
    logger.error("%s: %s", message, error, exc_info=True)
    return StoreError(message=message, context={"original_error": type(error).__name__})
