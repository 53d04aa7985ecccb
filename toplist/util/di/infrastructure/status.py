"""Status probe infrastructure providers."""

from dishka import Scope, provide

from toplist.adapter.status import HttpxStatusProbe
from toplist.config import Settings
from toplist.domain.service import StatusProbe
from toplist.util.di.base import ProviderBase


class StatusProvider(ProviderBase):
    """Status probe component base."""

    __mock_component__ = "status"


class ProdStatusProvider(StatusProvider):
    """Production status provider probing over HTTP."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_status_probe(self, settings: Settings) -> StatusProbe:
        """Provide httpx-backed status probe."""
        return HttpxStatusProbe(timeout=settings.status_probe.timeout_seconds)
