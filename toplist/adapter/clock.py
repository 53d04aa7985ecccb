"""Clock implementations."""

from datetime import datetime, timedelta, timezone

from toplist.domain.service.clock import Clock


class SystemClock(Clock):
    """Wall clock in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FrozenClock(Clock):
    """Manually driven clock for tests.

    Time only moves when ``advance`` is called.
    """

    def __init__(self, start: datetime | None = None) -> None:
        self._now = start or datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)

    def now(self) -> datetime:
        return self._now

    def advance(self, delta: timedelta) -> None:
        """Move the clock forward."""
        self._now = self._now + delta
