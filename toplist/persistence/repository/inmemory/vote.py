"""In-memory vote repository for testing."""

from datetime import datetime, timedelta
from typing import Optional

from toplist.domain.error import CooldownConflictError
from toplist.domain.model.vote import Vote
from toplist.domain.repository.vote import VoteRepository
from toplist.domain.value import ServerId, UserId

from .store import InMemoryStore


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing.

    Enforces the same cooldown rule as the database exclusion constraint.
    """

    def __init__(self, store: InMemoryStore, cooldown: timedelta) -> None:
        self._store = store
        self.cooldown = cooldown

    async def find_latest_since(
        self, user_id: UserId, server_id: ServerId, since: datetime
    ) -> Optional[Vote]:
        """Find the user's most recent vote for a server newer than ``since``."""
        matches = [
            v
            for v in self._store.votes
            if v.user_id == user_id and v.server_id == server_id and v.voted_at > since
        ]
        return max(matches, key=lambda v: v.voted_at, default=None)

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            CooldownConflictError: If the vote overlaps another vote's cooldown
        """
        for existing in self._store.votes:
            if (
                existing.user_id == vote.user_id
                and existing.server_id == vote.server_id
                and abs(existing.voted_at - vote.voted_at) < self.cooldown
            ):
                raise CooldownConflictError("Vote overlaps an earlier vote's cooldown")

        self._store.votes.append(vote)
        return vote

    async def count_by_server(self, server_id: ServerId) -> int:
        """Count all votes ever cast for a server."""
        return sum(1 for v in self._store.votes if v.server_id == server_id)
