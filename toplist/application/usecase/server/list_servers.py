"""List servers use case."""

from pydantic import BaseModel

from toplist.application.usecase.server.common import ServerInfo
from toplist.domain.repository import ServerFilters
from toplist.domain.service import Clock, ServerService


class ListServersResponse(BaseModel):
    """List servers response."""

    servers: list[ServerInfo]


class ListServersUseCase:
    """Use case for the explore listing."""

    def __init__(self, server_service: ServerService, clock: Clock) -> None:
        """Initialize list servers use case.

        Args:
            server_service: Server domain service
            clock: Time source for upcoming openings
        """
        self.server_service = server_service
        self.clock = clock

    async def execute(self, request: ServerFilters) -> ListServersResponse:
        """List approved servers matching the filters.

        Args:
            request: Explore filters

        Returns:
            Matching servers
        """
        servers = await self.server_service.list_servers(request, self.clock.now())
        return ListServersResponse(
            servers=[ServerInfo.from_server(server) for server in servers]
        )
