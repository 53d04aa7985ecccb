"""Server repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from toplist.domain.model.server import Server
from toplist.domain.value import ServerId, ServerSortOrder
from toplist.domain.value.common import ValueObject


class ServerFilters(ValueObject):
    """Filters for the explore listing.

    Only approved servers are ever listed.
    """

    name: Optional[str] = None  # Case-insensitive substring
    version: Optional[str] = None
    type: Optional[str] = None
    configuration: Optional[str] = None
    max_exp: Optional[int] = Field(default=None, ge=0)
    sort: ServerSortOrder = ServerSortOrder.VOTES
    limit: int = Field(default=50, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ServerRepository(ABC):
    """Repository for Server aggregate.

    Defines the contract for server persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, server_id: ServerId) -> Optional[Server]:
        """Find a server by ID regardless of status.

        Args:
            server_id: The server's ID

        Returns:
            The server if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_approved(
        self, filters: ServerFilters, now: datetime
    ) -> List[Server]:
        """Find approved servers matching the explore filters.

        Args:
            filters: Filter and sort options
            now: Reference time for the opening_soon sort

        Returns:
            Matching servers; featured servers come first among ties
        """
        pass

    @abstractmethod
    async def find_ranking(self, limit: int, offset: int) -> List[Server]:
        """Find approved servers ordered by votes_count DESC.

        Args:
            limit: Page size
            offset: Number of servers to skip

        Returns:
            One page of the ranking
        """
        pass

    @abstractmethod
    async def count_approved(self) -> int:
        """Count approved servers."""
        pass

    @abstractmethod
    async def sum_votes_approved(self) -> int:
        """Sum votes_count over approved servers."""
        pass

    @abstractmethod
    async def increment_votes(self, server_id: ServerId) -> None:
        """Atomically increment votes_count by 1.

        Args:
            server_id: The server's ID
        """
        pass

    @abstractmethod
    async def save(self, server: Server) -> Server:
        """Save a server (create).

        Args:
            server: The server to save

        Returns:
            The saved server
        """
        pass
