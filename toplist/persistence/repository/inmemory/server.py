"""In-memory server repository for testing."""

from datetime import datetime
from typing import Optional

from toplist.domain.model.server import Server
from toplist.domain.repository.server import ServerFilters, ServerRepository
from toplist.domain.value import ServerId, ServerSortOrder

from .store import InMemoryStore


class InMemoryServerRepository(ServerRepository):
    """In-memory implementation of ServerRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def _approved(self) -> list[Server]:
        return [s for s in self._store.servers.values() if s.is_approved]

    async def find_by_id(self, server_id: ServerId) -> Optional[Server]:
        """Find a server by ID regardless of status."""
        return self._store.servers.get(server_id)

    async def find_approved(
        self, filters: ServerFilters, now: datetime
    ) -> list[Server]:
        """Find approved servers matching the explore filters."""
        servers = self._approved()

        if filters.name:
            needle = filters.name.lower()
            servers = [s for s in servers if needle in s.name.lower()]
        if filters.version:
            servers = [s for s in servers if s.version == filters.version]
        if filters.type:
            servers = [s for s in servers if s.type == filters.type]
        if filters.configuration:
            servers = [s for s in servers if s.configuration == filters.configuration]
        if filters.max_exp is not None:
            servers = [
                s
                for s in servers
                if s.exp_rate is not None and s.exp_rate <= filters.max_exp
            ]

        if filters.sort == ServerSortOrder.NEWEST:
            servers.sort(
                key=lambda s: (-s.created_at.timestamp(), not s.is_featured, s.id)
            )
        elif filters.sort == ServerSortOrder.OPENING_SOON:
            servers = [
                s for s in servers if s.opening_date is not None and s.opening_date > now
            ]
            servers.sort(
                key=lambda s: (s.opening_date.timestamp(), not s.is_featured, s.id)
            )
        else:
            servers.sort(key=lambda s: (-s.votes_count, not s.is_featured, s.id))

        return servers[filters.offset : filters.offset + filters.limit]

    async def find_ranking(self, limit: int, offset: int) -> list[Server]:
        """Find approved servers ordered by votes_count DESC."""
        servers = sorted(
            self._approved(), key=lambda s: (-s.votes_count, not s.is_featured, s.id)
        )
        return servers[offset : offset + limit]

    async def count_approved(self) -> int:
        """Count approved servers."""
        return len(self._approved())

    async def sum_votes_approved(self) -> int:
        """Sum votes_count over approved servers."""
        return sum(s.votes_count for s in self._approved())

    async def increment_votes(self, server_id: ServerId) -> None:
        """Increment votes_count by 1."""
        server = self._store.servers.get(server_id)
        if server:
            self._store.servers[server_id] = server.model_copy(
                update={"votes_count": server.votes_count + 1}
            )

    async def save(self, server: Server) -> Server:
        """Save a server."""
        self._store.servers[server.id] = server
        return server
