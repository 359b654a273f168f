"""Shared fixtures for the communities test suite.

src.core.config builds Settings at import time, so the required variables
are defaulted here before any src module is imported. Markers and the
asyncio mode are configured in pyproject.toml.
"""

import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("API_BASE_URL", "http://test")
os.environ.setdefault("CORS_ORIGINS", "http://test")
os.environ.setdefault("DB_CREATE_TABLES", "false")

from collections.abc import AsyncGenerator  # noqa: E402

import pytest_asyncio  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

from src.infrastructure.persistence.database import Database  # noqa: E402


@pytest_asyncio.fixture
async def database() -> AsyncGenerator[Database, None]:
    """Empty in-memory SQLite store with the community schema, per test."""
    db = Database("sqlite+aiosqlite:///:memory:")
    await db.create_all()
    try:
        yield db
    finally:
        await db.close()


@pytest_asyncio.fixture
async def db_session(database: Database) -> AsyncGenerator[AsyncSession, None]:
    """Request-style session: committed when the test body passes."""
    async with database.get_session() as session:
        yield session
