"""Get ranking use case."""

from pydantic import BaseModel, Field

from toplist.application.usecase.server.common import ServerInfo
from toplist.domain.service import ServerService


class GetRankingRequest(BaseModel):
    """Get ranking request."""

    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=15, ge=1, le=100)


class RankedServerInfo(ServerInfo):
    """Server with its position in the ranking."""

    rank: int


class GetRankingResponse(BaseModel):
    """Get ranking response."""

    servers: list[RankedServerInfo]
    total: int
    page: int
    page_size: int


class GetRankingUseCase:
    """Use case for the paginated vote ranking."""

    def __init__(self, server_service: ServerService) -> None:
        """Initialize get ranking use case.

        Args:
            server_service: Server domain service
        """
        self.server_service = server_service

    async def execute(self, request: GetRankingRequest) -> GetRankingResponse:
        """Get one page of the ranking.

        Pages past the end come back empty with the real total.

        Args:
            request: Page selection

        Returns:
            Ranked servers and total count
        """
        servers, total = await self.server_service.get_ranking(
            request.page, request.page_size
        )
        first_rank = (request.page - 1) * request.page_size + 1

        return GetRankingResponse(
            servers=[
                RankedServerInfo(
                    **ServerInfo.from_server(server).model_dump(), rank=first_rank + i
                )
                for i, server in enumerate(servers)
            ],
            total=total,
            page=request.page,
            page_size=request.page_size,
        )
