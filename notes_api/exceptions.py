"""
Notes API — Custom Exception Hierarchy
========================================

What:  Defines the application's failure kinds.
Why:   Each handler either returns a result or raises exactly one of these,
       so the HTTP layer can pick a status code by exception type instead of
       inspecting message text.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.

Exception Hierarchy:
    NotesApiError (base)
    ├── ValidationError   → 400 Bad Request (client can fix)
    ├── NotFoundError     → 404 Not Found (also used for malformed ids)
    └── StoreError        → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class NotesApiError(Exception):
    """
    Base exception for all Notes API errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NotesApiError):
    """
    Raised when client input fails validation.

    When:    Missing or empty `content`, or a request body that is not a JSON object.
    HTTP:    400 Bad Request
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(NotesApiError):
    """
    Raised when a requested note does not exist.

    When:    GET/PUT/DELETE /notes/{id} with an unknown id, or with an id that
             is not a valid UUID. Callers cannot tell the two cases apart.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "Note",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource} not found"
        if resource_id is not None:
            message = f"{resource} not found with id {resource_id}"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource_id = resource_id


class StoreError(NotesApiError):
    """
    Raised when the underlying store fails unexpectedly.

    When:    Connection lost mid-query, constraint violation, driver error, etc.
    HTTP:    500 Internal Server Error

    The message names the failed operation; the driver's exception type is
    kept in `context` and logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
