"""
Noteful API - Test Configuration (conftest.py)
================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

The database URL points at a throwaway SQLite file. It is set BEFORE any
noteful import, because noteful.config builds its settings at import time.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── mock_db_session: Mock AsyncSession (service unit tests, no real DB)
    ├── db_tables:       Drops and recreates all tables (ids restart at 1)
    ├── seed:            Inserts raw rows into a table
    └── test_client:     HTTPX AsyncClient bound to the FastAPI app
"""

import os
import tempfile
from typing import Any, Dict, List
from unittest.mock import AsyncMock, MagicMock

_TEST_DB_DIR = tempfile.mkdtemp(prefix="noteful_test_")

os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_TEST_DB_DIR, 'test.db')}"
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy import insert  # noqa: E402

from noteful.database import Base, async_session_factory, engine  # noqa: E402
from noteful.models import Folder, Note  # noqa: E402,F401


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_get_folder(mock_db_session):
            mock_db_session.execute.return_value.scalar_one_or_none.return_value = folder
            result = await folder_service.get_folder(mock_db_session, 1)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest_asyncio.fixture
async def db_tables():
    """Fresh schema for each test; dropped again afterwards."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def seed(db_tables):
    """
    Insert rows straight into a table, bypassing the API.

    Usage:
        await seed(Folder, make_folders())
    """

    async def _seed(model, rows: List[Dict[str, Any]]) -> None:
        async with async_session_factory() as session:
            await session.execute(insert(model), rows)
            await session.commit()

    return _seed


@pytest_asyncio.fixture
async def test_client(db_tables):
    """
    HTTPX AsyncClient that routes requests directly to the FastAPI app.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from noteful.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
