"""Server domain service."""

from datetime import datetime
from math import ceil
from typing import Optional

import logfire

from toplist.domain.error import NotFoundError
from toplist.domain.model.server import Server
from toplist.domain.repository import ServerFilters, ServerRepository
from toplist.domain.value import ServerId, ServerStatus

from .base import Service

# Pending listings are reachable by direct link so owners can preview them
PUBLIC_STATUSES = (ServerStatus.APPROVED, ServerStatus.PENDING)


class ServerService(Service):
    """Domain service for server directory operations."""

    def __init__(self, server_repository: ServerRepository) -> None:
        """Initialize server service.

        Args:
            server_repository: Server repository
        """
        self.server_repository = server_repository

    async def get_server_by_id(self, server_id: ServerId) -> Optional[Server]:
        """Get a server by ID regardless of status.

        Args:
            server_id: Server ID

        Returns:
            Server if found, None otherwise
        """
        return await self.server_repository.find_by_id(server_id)

    async def get_public_server(self, server_id: ServerId) -> Server:
        """Get a server that may be shown publicly.

        Args:
            server_id: Server ID

        Returns:
            The server

        Raises:
            NotFoundError: If the server does not exist or was rejected
        """
        server = await self.server_repository.find_by_id(server_id)
        if server is None or server.status not in PUBLIC_STATUSES:
            raise NotFoundError("Server", str(server_id))
        return server

    async def list_servers(
        self, filters: ServerFilters, now: datetime
    ) -> list[Server]:
        """List approved servers for the explore view.

        Args:
            filters: Filter and sort options
            now: Reference time for upcoming openings

        Returns:
            Matching servers
        """
        with logfire.span("server_service.list_servers", sort=filters.sort.value):
            return await self.server_repository.find_approved(filters, now)

    async def get_ranking(
        self, page: int, page_size: int
    ) -> tuple[list[Server], int]:
        """Get one page of the vote ranking.

        Args:
            page: 1-based page number
            page_size: Servers per page

        Returns:
            Tuple of (servers on the page, total approved servers)
        """
        with logfire.span("server_service.get_ranking", page=page, page_size=page_size):
            total = await self.server_repository.count_approved()
            last_page = max(1, ceil(total / page_size))
            if page > last_page:
                return [], total

            servers = await self.server_repository.find_ranking(
                limit=page_size, offset=(page - 1) * page_size
            )
            return servers, total

    async def count_approved(self) -> int:
        """Count approved servers."""
        return await self.server_repository.count_approved()

    async def total_votes(self) -> int:
        """Sum of votes over approved servers."""
        return await self.server_repository.sum_votes_approved()

    async def increment_votes(self, server_id: ServerId) -> None:
        """Atomically increment a server's vote counter.

        Uses SQL-level increment to avoid lost updates.

        Args:
            server_id: Server ID
        """
        with logfire.span("server_service.increment_votes", server_id=server_id):
            await self.server_repository.increment_votes(server_id)
            logfire.info("Server votes incremented", server_id=server_id)
