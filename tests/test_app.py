"""
Notes API — Application Wiring Tests
======================================

What:  Startup/shutdown lifespan, the welcome and health routes, and settings.
Why:   A database that cannot be reached at startup must stop the process;
       everything else about the app shell is cheap to pin down here.
"""

import pytest
from unittest.mock import AsyncMock, patch

from sqlalchemy.ext.asyncio import create_async_engine

from notes_api.config import Settings
from notes_api.database import check_connection
from notes_api.exceptions import StoreError
from notes_api.main import create_app, lifespan


class TestLifespan:

    @pytest.mark.asyncio
    async def test_startup_aborts_when_database_unreachable(self):
        app = create_app()
        with patch("notes_api.main.setup_logging"), \
             patch("notes_api.main.check_connection",
                   AsyncMock(side_effect=StoreError("Could not connect to the database."))), \
             patch("notes_api.main.dispose_engine", AsyncMock()) as mock_dispose:

            with pytest.raises(StoreError):
                async with lifespan(app):
                    pass

            mock_dispose.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_startup_and_shutdown(self):
        app = create_app()
        with patch("notes_api.main.setup_logging"), \
             patch("notes_api.main.check_connection", AsyncMock()) as mock_check, \
             patch("notes_api.main.dispose_engine", AsyncMock()) as mock_dispose:

            async with lifespan(app):
                mock_check.assert_awaited_once()
                mock_dispose.assert_not_awaited()

            mock_dispose.assert_awaited_once()


class TestCheckConnection:

    @pytest.mark.asyncio
    async def test_reachable_database(self, db_engine):
        await check_connection(db_engine)

    @pytest.mark.asyncio
    async def test_unreachable_database_raises_store_error(self, tmp_path):
        missing = tmp_path / "no-such-dir" / "notes.db"
        engine = create_async_engine(f"sqlite+aiosqlite:///{missing}")
        try:
            with pytest.raises(StoreError) as exc_info:
                await check_connection(engine)
        finally:
            await engine.dispose()

        assert exc_info.value.context["original_error"] == "OperationalError"


class TestWelcomeAndHealth:

    @pytest.mark.asyncio
    async def test_welcome(self, test_client):
        response = await test_client.get("/")

        assert response.status_code == 200
        assert response.json()["message"].startswith("Welcome to the Notes API")

    @pytest.mark.asyncio
    async def test_health_healthy(self, test_client):
        with patch("notes_api.routes.health.check_connection", AsyncMock()):
            response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"

    @pytest.mark.asyncio
    async def test_health_unhealthy(self, test_client):
        failing = AsyncMock(side_effect=StoreError("Could not connect to the database."))
        with patch("notes_api.routes.health.check_connection", failing):
            response = await test_client.get("/health")

        assert response.status_code == 503
        body = response.json()
        assert body["status"] == "unhealthy"
        assert body["database"] == "disconnected"


class TestSettings:

    def test_log_level_is_upper_cased(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(ValueError):
            Settings(log_level="chatty")

    def test_cors_origins_list(self):
        settings = Settings(cors_origins="http://a.test, http://b.test,")
        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]

    def test_sqlite_detection(self):
        assert Settings(database_url="sqlite+aiosqlite:///./notes.db").is_sqlite
        assert not Settings(database_url="postgresql+asyncpg://u:p@db/notes").is_sqlite
