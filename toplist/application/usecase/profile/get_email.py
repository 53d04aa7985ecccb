"""Get email from username use case."""

from pydantic import BaseModel, ValidationError

from toplist.domain.error import InvalidArgumentError, NotFoundError
from toplist.domain.service import ProfileService
from toplist.domain.value import Username


class GetEmailRequest(BaseModel):
    """Get email request."""

    username: str | None = None


class GetEmailResponse(BaseModel):
    """Get email response."""

    email: str


class GetEmailFromUsernameUseCase:
    """Use case for signing in with a username instead of an email."""

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize get email use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: GetEmailRequest) -> GetEmailResponse:
        """Resolve a username to its sign-in email.

        Raises:
            InvalidArgumentError: If no username was given
            NotFoundError: If no profile has this username
            InternalError: If the profile has no email on record
        """
        if not request.username:
            raise InvalidArgumentError("A username is required.")

        try:
            username = Username(request.username)
        except ValidationError:
            # A malformed username cannot belong to any profile
            raise NotFoundError("Profile", request.username)

        email = await self.profile_service.get_email_for_username(username)
        return GetEmailResponse(email=email)
