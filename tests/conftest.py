"""
Notes API — Test Configuration (conftest.py)
==============================================

What:  Shared pytest fixtures for the entire test suite.
How:   Every test gets a fresh in-memory SQLite database (aiosqlite) with the
       notes table created from the ORM metadata. No PostgreSQL needed.

Fixture Hierarchy:
    db_engine ──▶ db_session ──▶ note_store ──▶ note_service
        └──────▶ test_client (app with get_db_session overridden)
    mock_store: AsyncMock NoteStore for store-failure paths
    failing_commits: app sessions whose commit fails after writing
"""

import os

# Override settings for testing BEFORE any notes_api imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"

from datetime import datetime, timezone
from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from notes_api.database import Base, get_db_session
from notes_api.main import create_app
from notes_api.models.note import Note
from notes_api.services.note_service import NoteService
from notes_api.storage.note_store import NoteStore


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine():
    """
    In-memory SQLite engine with the schema created.

    StaticPool keeps a single connection, so every session opened during the
    test sees the same in-memory database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def note_store(db_session):
    return NoteStore(db_session)


@pytest.fixture
def note_service(note_store):
    return NoteService(note_store)


# ══════════════════════════════════════════════════════════════════════════
# Mock Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_store():
    """
    A NoteStore double whose methods are AsyncMocks.

    Usage:
        mock_store.find_all.side_effect = OperationalError("SELECT", {}, Exception())
        with pytest.raises(StoreError):
            await NoteService(mock_store).list_all()
    """
    store = MagicMock(spec=NoteStore)
    store.insert = AsyncMock()
    store.find_all = AsyncMock(return_value=[])
    store.find_by_id = AsyncMock(return_value=None)
    store.replace = AsyncMock()
    store.delete = AsyncMock()
    return store


@pytest.fixture
def sample_note():
    """A detached Note with every column populated."""
    now = datetime.now(timezone.utc)
    return Note(
        id=uuid4(),
        title="Groceries",
        content="buy milk",
        created_at=now,
        updated_at=now,
    )


# ══════════════════════════════════════════════════════════════════════════
# HTTP Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def app(session_factory):
    """
    A fresh application whose session dependency uses the test database.

    The override mirrors get_db_session: rollback on error, commits happen in
    NoteStore.
    """
    application = create_app()

    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    application.dependency_overrides[get_db_session] = override_get_db_session
    return application


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient talking to the app in-process through ASGITransport.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/notes")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def failing_commits(app, session_factory):
    """
    Switch the app to sessions whose commit writes, then fails.

    The flush reaches the database before the error, so a test can check that
    the rollback really undid the write.

    Usage:
        failing_commits()
        response = await test_client.post("/notes", json={"content": "x"})
        assert response.status_code == 500
    """

    def install() -> None:
        async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
            async with session_factory() as session:

                async def commit_then_fail() -> None:
                    await session.flush()
                    raise OperationalError("COMMIT", {}, Exception("connection reset"))

                session.commit = commit_then_fail
                try:
                    yield session
                except Exception:
                    await session.rollback()
                    raise

        app.dependency_overrides[get_db_session] = override_get_db_session

    return install
