"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator
from datetime import timedelta

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from toplist.config import Settings, VotingSettings
from toplist.domain.repository import (
    ProfileRepository,
    ServerRepository,
    VoteRepository,
)
from toplist.persistence.database import create_engine, create_session_factory
from toplist.persistence.repository import (
    PostgresProfileRepository,
    PostgresServerRepository,
    PostgresVoteRepository,
)
from toplist.util.di.base import ProviderBase
from toplist.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

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
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is committed at the end of the request if no exception
        occurred, or rolled back if an exception was raised. The vote row
        and the counter increment therefore land in one transaction.
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
    def get_server_repository(self, session: AsyncSession) -> ServerRepository:
        """Provide Server repository."""
        return PostgresServerRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(
        self, session: AsyncSession, voting_settings: VotingSettings
    ) -> VoteRepository:
        """Provide Vote repository."""
        return PostgresVoteRepository(
            session, cooldown=timedelta(hours=voting_settings.cooldown_hours)
        )

    @provide(scope=Scope.REQUEST)
    def get_profile_repository(self, session: AsyncSession) -> ProfileRepository:
        """Provide Profile repository."""
        return PostgresProfileRepository(session)
