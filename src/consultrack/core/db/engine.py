"""Database engine management.

The engine lives inside an explicitly constructed ``Database`` object that is
created when the application starts and disposed when it stops. Nothing in
this module holds a module-level engine.
"""

import ssl
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from src.consultrack.core.config import Settings
from src.consultrack.core.logging import get_logger

logger = get_logger(__name__)


def _get_connect_args(settings: Settings) -> dict[str, Any]:
    """Get asyncpg connection arguments including SSL and statement timeout."""
    connect_args: dict[str, Any] = {
        # Bounded per-statement timeout; a timed out statement is not retried
        "command_timeout": settings.database_statement_timeout_seconds,
        "timeout": settings.database_pool_timeout_seconds,
    }

    ssl_mode = settings.database_ssl_mode
    if ssl_mode != "disable":
        ssl_context = ssl.create_default_context()
        if ssl_mode == "prefer" or ssl_mode == "require":
            ssl_context.check_hostname = False
            ssl_context.verify_mode = ssl.CERT_NONE
        elif ssl_mode in ("verify-ca", "verify-full"):
            ssl_context.check_hostname = ssl_mode == "verify-full"
            ssl_context.verify_mode = ssl.CERT_REQUIRED
        connect_args["ssl"] = ssl_context

    return connect_args


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """Build the production engine (asyncpg) from settings."""
    return create_async_engine(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        pool_timeout=settings.database_pool_timeout_seconds,
        pool_pre_ping=True,
        connect_args=_get_connect_args(settings),
    )


class Database:
    """Storage client: owns the engine and hands out sessions."""

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self._session_factory = async_sessionmaker(
            bind=engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(create_engine_from_settings(settings))

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession]:
        """Yield a session; uncommitted work is rolled back on close."""
        async with self._session_factory() as session:
            yield session

    async def ping(self) -> None:
        """Round-trip a trivial statement. Raises on failure."""
        async with self.engine.connect() as connection:
            await connection.execute(text("SELECT 1"))

    async def dispose(self) -> None:
        """Close pooled connections. Call during shutdown."""
        logger.info("Disposing database engine")
        await self.engine.dispose()
