"""Profile repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from toplist.domain.model.profile import Profile
from toplist.domain.value import Username


class ProfileRepository(ABC):
    """Repository for Profile entity."""

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[Profile]:
        """Find a profile by username.

        Args:
            username: The profile's username

        Returns:
            The profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all profiles."""
        pass

    @abstractmethod
    async def save(self, profile: Profile) -> Profile:
        """Save a profile (create).

        Args:
            profile: The profile to save

        Returns:
            The saved profile
        """
        pass
