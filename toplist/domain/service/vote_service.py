"""Vote domain service.

Vote admission: one accepted vote per user per server within the cooldown
window. The recency query below is only a fast path; the store's cooldown
constraint is what actually guarantees the invariant when two requests race.
"""

from datetime import timedelta
from math import ceil
from uuid import uuid4

import logfire

from toplist.domain.error import (
    CooldownConflictError,
    InvalidArgumentError,
    RateLimitedError,
)
from toplist.domain.model.vote import Vote
from toplist.domain.repository import VoteRepository
from toplist.domain.value import ServerId, UserId, VoteId

from .base import Service
from .clock import Clock
from .server_service import ServerService

COOLDOWN_MESSAGE = "You have already voted for this server in the last 24 hours."


class VoteService(Service):
    """Domain service for vote admission."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        server_service: ServerService,
        clock: Clock,
        cooldown: timedelta = timedelta(hours=24),
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            server_service: Server domain service
            clock: Time source
            cooldown: Minimum time between two votes for the same server
        """
        self.vote_repository = vote_repository
        self.server_service = server_service
        self.clock = clock
        self.cooldown = cooldown

    async def cast_vote(self, user_id: UserId, server_id: ServerId) -> Vote:
        """Cast a vote for a server.

        Records the vote and atomically increments the server's counter.
        Both writes go through the request's session, so they commit or
        roll back together.

        Args:
            user_id: Authenticated voter
            server_id: Server being voted for

        Returns:
            Created vote

        Raises:
            InvalidArgumentError: If the server does not exist or is not approved
            RateLimitedError: If the user voted for this server within the cooldown
        """
        with logfire.span(
            "vote_service.cast_vote", server_id=server_id, user_id=str(user_id)
        ):
            server = await self.server_service.get_server_by_id(server_id)
            if server is None or not server.is_approved:
                logfire.warn("Vote on unknown server", server_id=server_id)
                raise InvalidArgumentError("Server not found.")

            now = self.clock.now()

            last_vote = await self.vote_repository.find_latest_since(
                user_id, server_id, now - self.cooldown
            )
            if last_vote is not None:
                remaining = (last_vote.voted_at + self.cooldown - now).total_seconds()
                logfire.info(
                    "Vote rejected, cooldown active",
                    user_id=str(user_id),
                    server_id=server_id,
                    last_voted_at=last_vote.voted_at.isoformat(),
                )
                raise RateLimitedError(COOLDOWN_MESSAGE, retry_after=max(1, ceil(remaining)))

            vote = Vote(
                id=VoteId(uuid4()),
                user_id=user_id,
                server_id=server_id,
                voted_at=now,
            )

            try:
                saved_vote = await self.vote_repository.save(vote)
            except CooldownConflictError:
                # A concurrent request for the same pair got there first
                logfire.warn(
                    "Concurrent duplicate vote rejected",
                    user_id=str(user_id),
                    server_id=server_id,
                )
                raise RateLimitedError(
                    COOLDOWN_MESSAGE, retry_after=int(self.cooldown.total_seconds())
                )

            await self.server_service.increment_votes(server_id)

            logfire.info("Vote accepted", user_id=str(user_id), server_id=server_id)
            return saved_vote
