"""
Notes API — Application Package Initializer
=============================================

What:  Marks the `notes_api` directory as a Python package.
Why:   Enables module imports like `from notes_api.config import settings`.
Who:   Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    The service follows a layered architecture:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         NoteService (Handlers)      │  ← Validation, error mapping
    ├─────────────────────────────────────┤
    │       NoteStore (Storage Access)    │  ← The single `notes` collection
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    The store handle is handed to the service when it is built, so tests can
    swap in an in-memory database or a mock without touching module globals.
"""

__version__ = "1.0.0"
