"""Get server use case."""

from toplist.application.usecase.server.common import ServerInfo
from toplist.domain.service import ServerService
from toplist.domain.value import ServerId


class GetServerUseCase:
    """Use case for the server detail page."""

    def __init__(self, server_service: ServerService) -> None:
        """Initialize get server use case.

        Args:
            server_service: Server domain service
        """
        self.server_service = server_service

    async def execute(self, server_id: int) -> ServerInfo:
        """Get a publicly visible server.

        Raises:
            NotFoundError: If the server does not exist or was rejected
        """
        server = await self.server_service.get_public_server(ServerId(server_id))
        return ServerInfo.from_server(server)
