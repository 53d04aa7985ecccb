"""Server aggregate root.

A game server listed in the directory. Listings are submitted by owners,
moderated into the approved state, and accumulate votes.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from toplist.domain.model.common import DomainModel
from toplist.domain.value import ServerId, ServerStatus, UserId


class Server(DomainModel):
    """Server listing.

    votes_count is a denormalized counter maintained by vote admission.
    """

    id: ServerId
    name: str = Field(min_length=1, max_length=100)
    description: Optional[str] = None
    version: Optional[str] = None  # Game client version, e.g. "Season 6"
    type: Optional[str] = None  # e.g. "PvP", "PvE"
    configuration: Optional[str] = None  # e.g. "Easy", "Medium", "Hard"
    exp_rate: Optional[int] = Field(default=None, ge=0)
    drop_rate: Optional[int] = Field(default=None, ge=0)
    website_url: Optional[str] = None
    image_url: Optional[str] = None
    banner_url: Optional[str] = None
    status: ServerStatus = ServerStatus.PENDING
    is_featured: bool = False
    votes_count: int = Field(default=0, ge=0)
    opening_date: Optional[datetime] = None
    owner_id: Optional[UserId] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_approved(self) -> bool:
        """Whether the listing is publicly listed and votable."""
        return self.status == ServerStatus.APPROVED
