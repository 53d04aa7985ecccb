"""Async engine and session factory for PostgreSQL."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from toplist.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the asyncpg-backed engine.

    Connections run in UTC so that ``NOW()`` defaults and the cooldown
    ranges compare against the timestamps the service writes.

    Args:
        settings: Application settings

    Returns:
        Async engine with a bounded pool
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
        connect_args={
            "server_settings": {"application_name": "toplist-api", "timezone": "UTC"}
        },
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the factory for request-scoped sessions.

    Autoflush is off; repositories issue Core statements directly, and the
    session is committed once per request by the DI provider.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
