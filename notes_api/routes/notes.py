"""
Notes API — Notes Route Handlers
==================================

What:  The five CRUD endpoints under /notes.
How:   Builds a NoteService around the request's session, delegates, and
       returns the result. Failures are raised as exceptions and turned into
       JSON by the handlers registered in main.py.

Route Inventory:
    POST   /notes          create a note
    GET    /notes          list every note
    GET    /notes/{id}     fetch one note
    PUT    /notes/{id}     replace title/content
    DELETE /notes/{id}     remove a note

    `note_id` is taken as a plain string (not `UUID`) so that a malformed
    id reaches the service and answers 404 like any unknown id, instead of
    FastAPI's 422.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from notes_api.database import get_db_session
from notes_api.schemas.note import (
    ErrorResponse,
    MessageResponse,
    NotePayload,
    NoteResponse,
)
from notes_api.services.note_service import NoteService
from notes_api.storage.note_store import NoteStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notes", tags=["Notes"])


async def get_note_service(db: AsyncSession = Depends(get_db_session)) -> NoteService:
    """Per-request NoteService bound to the request's database session."""
    return NoteService(NoteStore(db))


@router.post(
    "",
    response_model=NoteResponse,
    responses={
        400: {"description": "Empty content", "model": ErrorResponse},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="Create a note",
)
async def create_note(
    payload: NotePayload,
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    return await service.create(payload)


@router.get(
    "",
    response_model=List[NoteResponse],
    responses={500: {"description": "Store error", "model": ErrorResponse}},
    summary="List all notes",
    description="Returns every stored note in insertion order. No pagination.",
)
async def list_notes(
    service: NoteService = Depends(get_note_service),
) -> List[NoteResponse]:
    return await service.list_all()


@router.get(
    "/{note_id}",
    response_model=NoteResponse,
    responses={
        404: {"description": "Note not found (or malformed id)", "model": ErrorResponse},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="Get a single note by ID",
)
async def get_note(
    note_id: str,
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    return await service.get_one(note_id)


@router.put(
    "/{note_id}",
    response_model=NoteResponse,
    responses={
        400: {"description": "Empty content", "model": ErrorResponse},
        404: {"description": "Note not found (or malformed id)", "model": ErrorResponse},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="Update a note",
    description="Replaces title and content. The response is the note after the update.",
)
async def update_note(
    note_id: str,
    payload: NotePayload,
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    return await service.update(note_id, payload)


@router.delete(
    "/{note_id}",
    response_model=MessageResponse,
    responses={
        404: {"description": "Note not found (or malformed id)", "model": ErrorResponse},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="Delete a note",
)
async def delete_note(
    note_id: str,
    service: NoteService = Depends(get_note_service),
) -> MessageResponse:
    return await service.delete(note_id)
