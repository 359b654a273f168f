"""Database and logger providers.

The Database and the logger live for the whole process (lru_cache); a
session lives for one community request and commits when the route
returns without raising.
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol


@lru_cache()
def get_database() -> Database:
    """Engine and session factory for DATABASE_URL (PostgreSQL or SQLite)."""
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
        pool_size=settings.db_pool_size,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Session shared by the repository and handler of one request.

    Yields:
        AsyncSession committed on success and rolled back on error.
    """
    async with get_database().get_session() as session:
        yield session


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Coloured console output in development, JSON lines elsewhere."""
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )
