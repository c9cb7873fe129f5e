"""Database connection and session management.

Provides the async engine, the session factory, and the connection
manager that owns both for the lifetime of the process.
"""

import asyncio
from typing import Callable, Optional

import logfire
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from threads.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,  # Log SQL queries in debug mode
        pool_pre_ping=True,  # Verify connections before using
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
    )


def create_session_factory(
    engine: Optional[AsyncEngine],
) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Args:
        engine: Database engine, or None for unbound sessions

    Returns:
        Session factory for creating database sessions
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,  # Don't expire objects after commit
        autoflush=False,  # Manual flushing for better control
        autocommit=False,  # Explicit transaction management
    )


class ConnectionManager:
    """Lazily connects to the database once per process.

    ``ensure_connected`` never raises: a missing or unusable connection
    string is logged like an unreachable server, and left for the first
    query to report.
    Until an engine exists, sessions are unbound and fail on first use.
    """

    def __init__(
        self,
        settings: Settings,
        on_engine_created: Optional[Callable[[AsyncEngine], None]] = None,
    ) -> None:
        """Initialize connection manager.

        Args:
            settings: Application settings
            on_engine_created: Hook run once on the new engine (instrumentation)
        """
        self.settings = settings
        self.on_engine_created = on_engine_created
        self._engine: Optional[AsyncEngine] = None
        self._session_factory = create_session_factory(None)
        self._connected = False
        self._lock = asyncio.Lock()

    @property
    def is_connected(self) -> bool:
        return self._connected

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        return self._session_factory

    async def ensure_connected(self) -> None:
        """Connect to the database if not already connected."""
        if self._connected:
            logfire.debug("Already connected to database")
            return

        async with self._lock:
            # Another task may have connected while we waited
            if self._connected:
                return

            if not self.settings.database_url:
                logfire.warn("Database URL not configured")
                return

            try:
                if self._engine is None:
                    self._create_engine()

                async with self._engine.connect() as conn:
                    await conn.execute(text("SELECT 1"))
            except Exception as e:
                logfire.error("Error connecting to database", error=str(e))
                return

            self._connected = True
            logfire.info("Connected to database")

    def _create_engine(self) -> None:
        """Build the engine and bind sessions to it.

        Nothing is kept if building or instrumenting the engine fails, so
        the next call starts over.
        """
        engine = create_engine(self.settings)
        try:
            if self.on_engine_created:
                self.on_engine_created(engine)
        except Exception:
            engine.sync_engine.dispose()
            raise
        self._engine = engine
        self._session_factory = create_session_factory(engine)

    async def dispose(self) -> None:
        """Close pooled connections."""
        if self._engine is not None:
            await self._engine.dispose()
            logfire.info("Database engine disposed")
        self._engine = None
        self._session_factory = create_session_factory(None)
        self._connected = False
