"""Database engine and session factory for PostgreSQL."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from bunko.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine from ``settings.database``."""
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,  # Log SQL in debug mode
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the session factory used for request-scoped sessions.

    Objects are not expired on commit and flushing is explicit: repositories
    flush inside a savepoint so constraint violations surface at the call
    site.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
