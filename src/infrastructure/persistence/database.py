"""Async engine and sessions for the community store.

PostgreSQL (asyncpg) in deployment, SQLite (aiosqlite) for local runs and
tests. SQLite only honors the ON DELETE CASCADE between communities,
posts and subscriptions when foreign keys are switched on per connection.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)


def _engine_options(database_url: str, echo: bool, pool_size: int) -> dict[str, Any]:
    if database_url.startswith("sqlite"):
        return {"echo": echo, "connect_args": {"check_same_thread": False}}

    options: dict[str, Any] = {
        "echo": echo,
        "pool_pre_ping": True,
        "pool_size": pool_size,
        "max_overflow": 0,
    }
    if database_url.startswith("postgresql"):
        options["connect_args"] = {
            "server_settings": {"jit": "off"},
            "command_timeout": 60,
            "timeout": 30,
        }
    return options


class Database:
    """Owns the engine; hands out one transactional session per request.

    Example:
        >>> db = Database("sqlite+aiosqlite:///communities.db")
        >>> async with db.get_session() as session:
        ...     await CommunityRepository(session).delete(7)
    """

    def __init__(self, database_url: str, echo: bool = False, pool_size: int = 20) -> None:
        self.engine: AsyncEngine = create_async_engine(
            database_url, **_engine_options(database_url, echo, pool_size)
        )
        if database_url.startswith("sqlite"):
            event.listen(self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

        self.async_session = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False
        )

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Session that commits when the block exits cleanly, else rolls back."""
        async with self.async_session() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def create_all(self) -> None:
        """Create the communities, posts, users and subscriber tables if missing."""
        from src.infrastructure.persistence.base import BaseModel
        import src.infrastructure.persistence.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.create_all)

    async def close(self) -> None:
        await self.engine.dispose()

    async def check_connection(self) -> bool:
        """True when a trivial query succeeds; backs GET /health."""
        try:
            async with self.get_session() as session:
                await session.execute(text("SELECT 1"))
        except Exception:
            return False
        return True


def _enable_sqlite_foreign_keys(dbapi_connection: Any, _connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()
