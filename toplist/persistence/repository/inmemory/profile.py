"""In-memory profile repository for testing."""

from typing import Optional

from toplist.domain.model.profile import Profile
from toplist.domain.repository.profile import ProfileRepository
from toplist.domain.value import Username

from .store import InMemoryStore


class InMemoryProfileRepository(ProfileRepository):
    """In-memory implementation of ProfileRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_username(self, username: Username) -> Optional[Profile]:
        """Find a profile by username."""
        for profile in self._store.profiles.values():
            if profile.username == username:
                return profile
        return None

    async def count(self) -> int:
        """Count all profiles."""
        return len(self._store.profiles)

    async def save(self, profile: Profile) -> Profile:
        """Save a profile."""
        self._store.profiles[profile.id] = profile
        return profile
