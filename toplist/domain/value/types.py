"""Domain value objects for the server toplist."""

import re
from enum import Enum

from pydantic import field_validator

from toplist.domain.value.common import RootValueObject


class ServerStatus(str, Enum):
    """Moderation status of a server listing."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class ProfileRole(str, Enum):
    """Role of a profile."""

    USER = "user"
    ADMIN = "admin"


class ServerSortOrder(str, Enum):
    """Sort order for the explore listing."""

    VOTES = "votes"  # votes_count DESC
    NEWEST = "newest"  # created_at DESC
    OPENING_SOON = "opening_soon"  # future opening_date ASC


class ServerStatusCheck(str, Enum):
    """Result of probing a server's website."""

    ONLINE = "online"
    OFFLINE = "offline"


class Username(RootValueObject[str]):
    """Profile username.

    3-30 characters: letters, digits, underscores, dots and hyphens.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not re.match(r"^[A-Za-z0-9_.-]{3,30}$", v):
            raise ValueError(
                "Username must be 3-30 characters of letters, digits, '_', '.' or '-'"
            )
        return v
