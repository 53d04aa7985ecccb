"""PostgreSQL implementation of Vote repository."""

from datetime import datetime, timedelta
from typing import Optional

from sqlalchemy import and_, func, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from toplist.domain.error import CooldownConflictError
from toplist.domain.model import Vote
from toplist.domain.repository import VoteRepository
from toplist.domain.value import ServerId, UserId
from toplist.persistence.mappers import row_to_vote, vote_to_dict
from toplist.persistence.tables import votes_table

EXCLUSION_VIOLATION = "23P01"
COOLDOWN_CONSTRAINT = "votes_no_overlapping_cooldown"


def is_cooldown_violation(error: IntegrityError) -> bool:
    """Tell the cooldown exclusion constraint apart from other violations."""
    sqlstate = getattr(error.orig, "sqlstate", None)
    return sqlstate == EXCLUSION_VIOLATION and COOLDOWN_CONSTRAINT in str(error.orig)


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession, cooldown: timedelta) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
            cooldown: Cooldown window written to cooldown_ends_at
        """
        self.session = session
        self.cooldown = cooldown

    async def find_latest_since(
        self, user_id: UserId, server_id: ServerId, since: datetime
    ) -> Optional[Vote]:
        """Find the user's most recent vote for a server newer than ``since``."""
        stmt = (
            select(votes_table)
            .where(
                and_(
                    votes_table.c.user_id == user_id,
                    votes_table.c.server_id == server_id,
                    votes_table.c.voted_at > since,
                )
            )
            .order_by(votes_table.c.voted_at.desc())
            .limit(1)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create).

        Runs inside a savepoint so a constraint violation leaves the request
        transaction usable.

        Raises:
            CooldownConflictError: If the vote overlaps another vote's cooldown
            IntegrityError: For any other constraint violation
        """
        stmt = insert(votes_table).values(**vote_to_dict(vote, self.cooldown))
        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            if is_cooldown_violation(e):
                raise CooldownConflictError(str(e.orig)) from e
            raise
        return vote

    async def count_by_server(self, server_id: ServerId) -> int:
        """Count all votes ever cast for a server."""
        stmt = (
            select(func.count())
            .select_from(votes_table)
            .where(votes_table.c.server_id == server_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
