"""In-memory repository implementations for testing."""

from .profile import InMemoryProfileRepository
from .server import InMemoryServerRepository
from .store import InMemoryStore
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryProfileRepository",
    "InMemoryServerRepository",
    "InMemoryStore",
    "InMemoryVoteRepository",
]
