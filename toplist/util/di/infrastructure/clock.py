"""Clock infrastructure providers."""

from dishka import Scope, provide

from toplist.adapter.clock import SystemClock
from toplist.domain.service import Clock
from toplist.util.di.base import ProviderBase


class ClockProvider(ProviderBase):
    """Clock component base."""

    __mock_component__ = "clock"


class ProdClockProvider(ClockProvider):
    """Production clock provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_clock(self) -> Clock:
        """Provide wall clock."""
        return SystemClock()
