"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from threads.config import Settings
from threads.domain.repository import ThreadRepository, UnitOfWork, UserRepository
from threads.persistence.database import ConnectionManager
from threads.persistence.repository import (
    PostgresThreadRepository,
    PostgresUserRepository,
    SqlAlchemyUnitOfWork,
)
from threads.util.di.base import ProviderBase
from threads.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_connection_manager(
        self, settings: Settings
    ) -> AsyncIterator[ConnectionManager]:
        """Provide the process-wide connection manager.

        The engine is created on first use and disposed when the
        container closes.
        """
        manager = ConnectionManager(settings, on_engine_created=instrument_sqlalchemy)
        yield manager
        await manager.dispose()

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, connection_manager: ConnectionManager
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is automatically committed at the end of the request
        if no exception occurred, or rolled back if an exception was raised.
        """
        await connection_manager.ensure_connected()
        async with connection_manager.session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.info("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_thread_repository(self, session: AsyncSession) -> ThreadRepository:
        """Provide Thread repository."""
        return PostgresThreadRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self, session: AsyncSession) -> UnitOfWork:
        """Provide the request's transaction boundary."""
        return SqlAlchemyUnitOfWork(session)
