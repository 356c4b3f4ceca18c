"""
Notes API — Pydantic Request/Response Schemas
===============================================

What:  Pydantic models defining the API contract.
Why:   Input parsing, automatic serialization, and OpenAPI doc generation.
How:   FastAPI uses these models to parse request bodies and serialize
       responses. Field names are snake_case in Python and camelCase on the
       wire (`createdAt`, `updatedAt`).

Design Decision:
    `NotePayload.content` is Optional on purpose. A missing or empty content
    is a business-rule failure reported as 400 by NoteService, not a schema
    failure, so the schema lets it through and the service decides.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


DEFAULT_TITLE = "Untitled Note"


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class NotePayload(BaseModel):
    """Body of POST /notes and PUT /notes/{id}."""
    title: Optional[str] = Field(
        default=None,
        description=f"Note title. Defaults to '{DEFAULT_TITLE}' when absent or empty.",
    )
    content: Optional[str] = Field(
        default=None,
        description="Note body. Required and must not be empty.",
    )


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """
    What:  Full representation of a stored note.
    Who:   Returned by every note endpoint except DELETE.
    """
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: uuid.UUID = Field(description="Unique note identifier (UUID)")
    title: str = Field(description="Note title")
    content: str = Field(description="Note body")
    created_at: datetime = Field(description="When the note was created (UTC ISO 8601)")
    updated_at: datetime = Field(description="When the note was last updated (UTC ISO 8601)")


class MessageResponse(BaseModel):
    """Plain confirmation body, e.g. after a delete."""
    message: str = Field(description="Human-readable confirmation")


# ══════════════════════════════════════════════════════════════════════════
# Error / Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.

    Example:
        {
            "error": "not_found",
            "message": "Note not found with id 6f1c..."
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and container health checks."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
