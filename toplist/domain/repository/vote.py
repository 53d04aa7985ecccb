"""Vote repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from toplist.domain.model.vote import Vote
from toplist.domain.value import ServerId, UserId


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_latest_since(
        self, user_id: UserId, server_id: ServerId, since: datetime
    ) -> Optional[Vote]:
        """Find the user's most recent vote for a server newer than ``since``.

        Args:
            user_id: The voter's ID
            server_id: The server's ID
            since: Exclusive lower bound on voted_at

        Returns:
            The most recent matching vote, None if there is none
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Save a new vote.

        The store rejects a vote that falls inside the cooldown window of
        another vote by the same user for the same server.

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            CooldownConflictError: If the cooldown constraint is violated
            IntegrityError: For any other constraint violation
        """
        pass

    @abstractmethod
    async def count_by_server(self, server_id: ServerId) -> int:
        """Count all votes ever cast for a server.

        Args:
            server_id: The server's ID

        Returns:
            Number of vote rows
        """
        pass
