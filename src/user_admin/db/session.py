"""Database connection and session management."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from .. import models  # noqa: F401  - registers tables on the metadata
from ..core.config import Settings

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection: Any, _connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Async store handle owning the engine and the session factory.

    The handle is constructed explicitly and passed to whatever needs a
    session; ``connect()`` and ``disconnect()`` bracket its lifetime.
    """

    def __init__(self, database_url: str, *, echo: bool = False, **engine_options: Any) -> None:
        self.database_url = database_url
        self.echo = echo
        self._engine_options = engine_options
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """Build a handle using the pooling options from ``settings``."""
        options: dict[str, Any] = {}
        if make_url(settings.database_url).get_backend_name() != "sqlite":
            options["pool_size"] = settings.db_pool_size
            options["max_overflow"] = settings.db_max_overflow
        return cls(settings.database_url, echo=settings.db_echo, **options)

    @property
    def is_connected(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError("Database not connected. Call connect() first.")
        return self._engine

    async def connect(self) -> None:
        """Create the engine and session factory if not already present."""
        if self._engine is not None:
            return

        self._engine = create_async_engine(
            self.database_url,
            echo=self.echo,
            pool_pre_ping=True,
            **self._engine_options,
        )
        if self._engine.dialect.name == "sqlite":
            event.listen(self._engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

        self._session_factory = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        logger.info("Database engine created", extra={"dialect": self._engine.dialect.name})

    async def disconnect(self) -> None:
        """Dispose of the engine and drop the session factory."""
        if self._engine is None:
            return

        await self._engine.dispose()
        self._engine = None
        self._session_factory = None
        logger.info("Database engine disposed")

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Yield an ``AsyncSession``; callers own commit and rollback."""
        if self._session_factory is None:
            raise RuntimeError("Database not connected. Call connect() first.")

        async with self._session_factory() as session:
            yield session

    async def create_all(self) -> None:
        """Create all tables (primarily for tests and local development)."""
        async with self.engine.begin() as connection:
            await connection.run_sync(SQLModel.metadata.create_all)

    async def drop_all(self) -> None:
        """Drop all tables known to the model metadata."""
        async with self.engine.begin() as connection:
            await connection.run_sync(SQLModel.metadata.drop_all)

    async def health_check(self) -> bool:
        """Return ``True`` when a trivial query succeeds."""
        if self._engine is None:
            return False

        try:
            async with self.session() as session:
                await session.execute(text("SELECT 1"))
        except Exception:
            logger.warning("Database health check failed", exc_info=True)
            return False
        return True


__all__ = ["Database"]
