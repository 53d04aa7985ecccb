"""Vote entity.

A vote is one user's endorsement of one server. Votes are never updated
or deleted; the history is kept for counting.
"""

from datetime import datetime, timezone

from pydantic import Field

from toplist.domain.model.common import DomainModel
from toplist.domain.value import ServerId, UserId, VoteId


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - At most one vote per user per server within any trailing cooldown
      window (enforced by a database exclusion constraint)
    - Each accepted vote increments the server's votes_count exactly once
    """

    id: VoteId
    user_id: UserId
    server_id: ServerId
    voted_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
