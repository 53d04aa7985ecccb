"""Server status domain service."""

from abc import ABC, abstractmethod

import logfire

from toplist.domain.error import InvalidArgumentError
from toplist.domain.value import ServerStatusCheck

from .base import Service


class StatusProbe(ABC):
    """Generic interface for probing a website."""

    @abstractmethod
    async def is_reachable(self, url: str) -> bool:
        """Check whether a URL answers with a 2xx response.

        Implementations never raise for network failures; an unreachable
        site is simply reported as not reachable.

        Args:
            url: Absolute http(s) URL

        Returns:
            True if the site answered with a 2xx status
        """
        pass


class StatusService(Service):
    """Domain service for checking whether a listed server is online."""

    def __init__(self, status_probe: StatusProbe) -> None:
        """Initialize status service.

        Args:
            status_probe: Website probe implementation
        """
        self.status_probe = status_probe

    async def check_status(self, url: str | None) -> ServerStatusCheck:
        """Check whether a server's website is online.

        Args:
            url: Website URL, must start with ``http``

        Returns:
            ONLINE if the site answered with a 2xx, OFFLINE otherwise

        Raises:
            InvalidArgumentError: If the URL is missing or not http(s)
        """
        if not url or not url.startswith("http"):
            raise InvalidArgumentError("A valid URL is required.")

        with logfire.span("status_service.check_status", url=url):
            reachable = await self.status_probe.is_reachable(url)
            status = ServerStatusCheck.ONLINE if reachable else ServerStatusCheck.OFFLINE
            logfire.info("Server status checked", url=url, status=status.value)
            return status
