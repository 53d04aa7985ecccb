"""Profile domain service."""

import logfire

from toplist.domain.error import InternalError, NotFoundError
from toplist.domain.repository import ProfileRepository
from toplist.domain.value import Username

from .base import Service


class ProfileService(Service):
    """Domain service for profile operations."""

    def __init__(self, profile_repository: ProfileRepository) -> None:
        """Initialize profile service.

        Args:
            profile_repository: Profile repository
        """
        self.profile_repository = profile_repository

    async def get_email_for_username(self, username: Username) -> str:
        """Resolve the sign-in email of a profile.

        Lets the sign-in form accept a username instead of an email.

        Args:
            username: Profile username

        Returns:
            The profile's email

        Raises:
            NotFoundError: If no profile has this username
            InternalError: If the profile has no email on record
        """
        with logfire.span("profile_service.get_email_for_username"):
            profile = await self.profile_repository.find_by_username(username)
            if profile is None:
                logfire.info("Username lookup miss", username=str(username))
                raise NotFoundError("Profile", str(username))

            if not profile.email:
                logfire.error("Profile has no email", profile_id=str(profile.id))
                raise InternalError("Could not load user information.")

            return profile.email

    async def count_profiles(self) -> int:
        """Count registered profiles."""
        return await self.profile_repository.count()
