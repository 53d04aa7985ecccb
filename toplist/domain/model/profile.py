"""Profile entity.

Profiles hold public account data for an authenticated identity. The
profile ID is the identity provider's user ID.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from toplist.domain.model.common import DomainModel
from toplist.domain.value import ProfileRole, UserId, Username


class Profile(DomainModel):
    """User profile."""

    id: UserId
    username: Username
    email: Optional[str] = None
    avatar_url: Optional[str] = None
    role: ProfileRole = ProfileRole.USER
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
