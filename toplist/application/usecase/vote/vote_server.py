"""Vote for server use case."""

from pydantic import BaseModel

from toplist.application.usecase.base import BaseUseCase
from toplist.domain.error import UnauthenticatedError
from toplist.domain.service import JWTService, VoteService
from toplist.domain.value import ServerId

SUCCESS_MESSAGE = "Vote recorded successfully!"
UNAUTHENTICATED_MESSAGE = "You must be signed in to vote."


class VoteServerRequest(BaseModel):
    """Vote for server request."""

    authorization: str | None  # Raw Authorization header
    server_id: int


class VoteServerResponse(BaseModel):
    """Vote for server response."""

    message: str


class VoteServerUseCase(BaseUseCase):
    """Use case for casting a vote for a server."""

    def __init__(self, jwt_service: JWTService, vote_service: VoteService) -> None:
        """Initialize vote server use case.

        Args:
            jwt_service: JWT service for resolving the caller
            vote_service: Vote domain service
        """
        self.jwt_service = jwt_service
        self.vote_service = vote_service

    async def execute(self, request: VoteServerRequest) -> VoteServerResponse:
        """Execute vote flow.

        Steps:
        1. Resolve the caller from the bearer credential
        2. Admit or reject the vote (cooldown check, insert, counter increment)

        Args:
            request: Vote request

        Returns:
            Confirmation message

        Raises:
            UnauthenticatedError: If the credential is missing or invalid
            InvalidArgumentError: If the server does not exist
            RateLimitedError: If the cooldown window is active
        """
        user_id = self.jwt_service.get_user_id_from_bearer(request.authorization)
        if user_id is None:
            raise UnauthenticatedError(UNAUTHENTICATED_MESSAGE)

        await self.vote_service.cast_vote(user_id, ServerId(request.server_id))

        return VoteServerResponse(message=SUCCESS_MESSAGE)
