"""
Notes API — Database Session Management
=========================================

What:  Async SQLAlchemy engine, session factory, and FastAPI dependency.
Why:   Centralizes all database connection logic in one place.
How:   Creates an async engine with connection pooling, provides a session
       dependency that rolls back on error and always closes.
Who:   Used by route handlers via FastAPI's dependency injection system.
When:  Engine is created at module import; sessions are created per-request.

Connection Pooling Strategy:
    pool_size / max_overflow come from settings for server databases.
    SQLite URLs skip the pool options: SQLAlchemy picks a pool suited to the
    file or in-memory database and rejects explicit sizing for some of them.
"""

from typing import Any, AsyncGenerator, Dict, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from notes_api.config import settings
from notes_api.exceptions import StoreError


def _engine_options() -> Dict[str, Any]:
    options: Dict[str, Any] = {"echo": settings.log_level == "DEBUG"}
    if not settings.is_sqlite:
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,  # Recycle after 1 hour to prevent stale connections
        )
    return options


# ── Engine Configuration ──────────────────────────────────────────────────
engine = create_async_engine(settings.database_url, **_engine_options())

# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: attributes stay readable after commit, which the
# response serialization relies on
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Registers models with a single metadata object, which Alembic uses for
    migrations and the test suite uses for `create_all`.
    """
    pass


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the route handler
        3. On error: rolls back the transaction
        4. Always: closes the session (returns connection to pool)

    Commits happen inside NoteStore's write methods, before the response is
    built. Teardown here runs after the response is sent, so a commit failure
    at this point could no longer change the status code.

    Raises:
        Any exception from the handler is re-raised after rollback so the
        global error handlers can respond.
    """
    async with async_session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def check_connection(target: Optional[AsyncEngine] = None) -> None:
    """
    Verify the store is reachable by running `SELECT 1`.

    Used by the application lifespan, where a failure aborts startup, and by
    GET /health.

    Raises:
        StoreError: The database could not be reached.
    """
    target = target or engine
    try:
        async with target.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as e:
        raise StoreError(
            message="Could not connect to the database.",
            context={"original_error": type(e).__name__, "detail": str(e)},
        ) from e


async def dispose_engine() -> None:
    """Gracefully closes all connections in the pool (application shutdown)."""
    await engine.dispose()
