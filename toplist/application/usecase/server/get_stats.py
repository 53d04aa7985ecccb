"""Get global stats use case."""

from pydantic import BaseModel

from toplist.domain.service import ProfileService, ServerService


class GlobalStatsResponse(BaseModel):
    """Directory-wide counters."""

    total_servers: int
    total_users: int
    total_votes: int


class GetGlobalStatsUseCase:
    """Use case for the homepage statistics."""

    def __init__(
        self, server_service: ServerService, profile_service: ProfileService
    ) -> None:
        """Initialize get global stats use case.

        Args:
            server_service: Server domain service
            profile_service: Profile domain service
        """
        self.server_service = server_service
        self.profile_service = profile_service

    async def execute(self) -> GlobalStatsResponse:
        """Collect directory-wide counters.

        total_votes is the sum of the denormalized counters of approved
        servers, so it matches what the ranking shows.
        """
        return GlobalStatsResponse(
            total_servers=await self.server_service.count_approved(),
            total_users=await self.profile_service.count_profiles(),
            total_votes=await self.server_service.total_votes(),
        )
