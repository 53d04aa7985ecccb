"""Server status use cases."""

from .check_status import CheckStatusRequest, CheckStatusResponse, CheckStatusUseCase

__all__ = [
    "CheckStatusRequest",
    "CheckStatusResponse",
    "CheckStatusUseCase",
]
