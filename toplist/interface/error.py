"""Interface layer errors.

Domain errors are mapped to HTTP status codes here. Every error response
body is ``{"error": "<message>"}``.
"""

from fastapi import status
from pydantic import BaseModel

from toplist.domain.error import (
    DomainError,
    InternalError,
    InvalidArgumentError,
    NotFoundError,
    RateLimitedError,
    UnauthenticatedError,
)

INTERNAL_ERROR_MESSAGE = "An unexpected error occurred. Please try again later."

_STATUS_BY_ERROR: dict[type[DomainError], int] = {
    InvalidArgumentError: status.HTTP_400_BAD_REQUEST,
    UnauthenticatedError: status.HTTP_401_UNAUTHORIZED,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    RateLimitedError: status.HTTP_429_TOO_MANY_REQUESTS,
    InternalError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class ErrorResponse(BaseModel):
    """Error response body."""

    error: str


def status_code_for(error: DomainError) -> int:
    """Resolve the HTTP status for a domain error.

    Unmapped subclasses fall back to their nearest mapped ancestor, and
    to 500 when there is none.
    """
    for cls in type(error).__mro__:
        if cls in _STATUS_BY_ERROR:
            return _STATUS_BY_ERROR[cls]
    return status.HTTP_500_INTERNAL_SERVER_ERROR
