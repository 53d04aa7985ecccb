"""Mock persistence providers for testing."""

from datetime import timedelta

from dishka import Scope, provide

from toplist.config import VotingSettings
from toplist.domain.repository import (
    ProfileRepository,
    ServerRepository,
    VoteRepository,
)
from toplist.persistence.repository.inmemory import (
    InMemoryProfileRepository,
    InMemoryServerRepository,
    InMemoryStore,
    InMemoryVoteRepository,
)
from toplist.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are REQUEST-scoped like their Postgres counterparts but
    share one APP-scoped store, so data written in one request is visible
    to the next. Each container gets a fresh store.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        """Provide the shared in-memory store."""
        return InMemoryStore()

    @provide(scope=Scope.REQUEST)
    def get_server_repository(self, store: InMemoryStore) -> ServerRepository:
        """Provide in-memory server repository."""
        return InMemoryServerRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(
        self, store: InMemoryStore, voting_settings: VotingSettings
    ) -> VoteRepository:
        """Provide in-memory vote repository."""
        return InMemoryVoteRepository(
            store, cooldown=timedelta(hours=voting_settings.cooldown_hours)
        )

    @provide(scope=Scope.REQUEST)
    def get_profile_repository(self, store: InMemoryStore) -> ProfileRepository:
        """Provide in-memory profile repository."""
        return InMemoryProfileRepository(store)
