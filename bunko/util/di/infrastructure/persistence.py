"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from bunko.config import Settings
from bunko.domain.repository import PostRepository, PostTypeRepository
from bunko.persistence.database import create_engine, create_session_factory
from bunko.persistence.repository import (
    PostgresPostRepository,
    PostgresPostTypeRepository,
)
from bunko.util.di.base import ProviderBase
from bunko.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        Committed at the end of the request if no exception occurred,
        rolled back otherwise.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.debug("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, session: AsyncSession) -> PostRepository:
        """Provide Post repository."""
        return PostgresPostRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_post_type_repository(self, session: AsyncSession) -> PostTypeRepository:
        """Provide PostType repository."""
        return PostgresPostTypeRepository(session)
