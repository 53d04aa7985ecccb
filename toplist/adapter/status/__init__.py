"""Website status probe adapters."""

from .probe import HttpxStatusProbe, MockStatusProbe

__all__ = ["HttpxStatusProbe", "MockStatusProbe"]
