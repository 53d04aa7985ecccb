"""Mock providers for testing."""

from .clock import MockClockProvider
from .persistence import MockPersistenceProvider
from .status import MockStatusProvider
from .container import build_test_container

__all__ = [
    "MockClockProvider",
    "MockPersistenceProvider",
    "MockStatusProvider",
    "build_test_container",
]
