"""Domain value objects for the server toplist."""

from toplist.domain.value.identifiers import ServerId, UserId, VoteId
from toplist.domain.value.types import (
    ProfileRole,
    ServerSortOrder,
    ServerStatus,
    ServerStatusCheck,
    Username,
)

__all__ = [
    # Identifiers
    "UserId",
    "ServerId",
    "VoteId",
    # Types
    "ProfileRole",
    "ServerSortOrder",
    "ServerStatus",
    "ServerStatusCheck",
    "Username",
]
