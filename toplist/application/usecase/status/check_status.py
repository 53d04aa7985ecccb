"""Check server status use case."""

from pydantic import BaseModel

from toplist.domain.service import StatusService
from toplist.domain.value import ServerStatusCheck


class CheckStatusRequest(BaseModel):
    """Check status request."""

    url: str | None = None


class CheckStatusResponse(BaseModel):
    """Check status response."""

    status: ServerStatusCheck


class CheckStatusUseCase:
    """Use case for probing a server's website."""

    def __init__(self, status_service: StatusService) -> None:
        """Initialize check status use case.

        Args:
            status_service: Status domain service
        """
        self.status_service = status_service

    async def execute(self, request: CheckStatusRequest) -> CheckStatusResponse:
        """Probe the website.

        Raises:
            InvalidArgumentError: If the URL is missing or not http(s)
        """
        status = await self.status_service.check_status(request.url)
        return CheckStatusResponse(status=status)
