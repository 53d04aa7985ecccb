"""Website status probe implementations."""

import httpx
import logfire

from toplist.domain.service.status_service import StatusProbe


class HttpxStatusProbe(StatusProbe):
    """Probe a website with a single GET request.

    Redirects are followed. Any transport failure, including the timeout,
    counts as unreachable.
    """

    def __init__(
        self,
        timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize probe.

        Args:
            timeout: Overall request timeout in seconds
            transport: Custom transport, e.g. httpx.MockTransport in tests
        """
        self.timeout = timeout
        self.transport = transport

    async def is_reachable(self, url: str) -> bool:
        """Check whether a URL answers with a 2xx response."""
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                transport=self.transport,
            ) as client:
                response = await client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logfire.info("Status probe failed", url=url, error=str(e))
            return False

        return response.is_success


class MockStatusProbe(StatusProbe):
    """Probe with canned answers for testing.

    URLs registered with ``set_online`` are reachable, every other URL is not.
    """

    def __init__(self) -> None:
        self._online: set[str] = set()
        self.requested: list[str] = []

    def set_online(self, url: str, online: bool = True) -> None:
        """Mark a URL as reachable or unreachable."""
        if online:
            self._online.add(url)
        else:
            self._online.discard(url)

    async def is_reachable(self, url: str) -> bool:
        """Answer from the registered URLs."""
        self.requested.append(url)
        return url in self._online
