"""Repository interfaces for the toplist domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from toplist.domain.repository.profile import ProfileRepository
from toplist.domain.repository.server import ServerFilters, ServerRepository
from toplist.domain.repository.vote import VoteRepository

__all__ = [
    "ProfileRepository",
    "ServerFilters",
    "ServerRepository",
    "VoteRepository",
]
