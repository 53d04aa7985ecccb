"""Domain model entities for the server toplist."""

from toplist.domain.model.profile import Profile
from toplist.domain.model.server import Server
from toplist.domain.model.vote import Vote

__all__ = [
    "Profile",
    "Server",
    "Vote",
]
