"""Shared state for in-memory repositories.

Repositories are created per request but must see the same data across
requests, so the rows live in a store with application lifetime.
"""

from toplist.domain.model import Profile, Server, Vote
from toplist.domain.value import ServerId, UserId


class InMemoryStore:
    """Tables of the in-memory database."""

    def __init__(self) -> None:
        self.servers: dict[ServerId, Server] = {}
        self.votes: list[Vote] = []
        self.profiles: dict[UserId, Profile] = {}
