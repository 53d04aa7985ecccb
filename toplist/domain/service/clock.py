"""Clock interface.

Time is injected so that cooldown windows can be exercised in tests.
"""

from datetime import datetime


class Clock:
    """Source of the current time."""

    def now(self) -> datetime:
        """Return the current timezone-aware UTC time."""
        raise NotImplementedError
