"""Domain layer errors.

Each error maps to one HTTP status in the interface layer.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class InvalidArgumentError(DomainError):
    """Malformed or missing request input."""

    pass


class UnauthenticatedError(DomainError):
    """Missing, invalid or expired credential."""

    pass


class RateLimitedError(DomainError):
    """Raised when the vote cooldown window is still active.

    Attributes:
        retry_after: Seconds until the caller may vote again
    """

    def __init__(self, message: str, retry_after: int):
        self.retry_after = retry_after
        super().__init__(message)


class InternalError(DomainError):
    """Unexpected data store or network failure."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class CooldownConflictError(DomainError):
    """Raised by the vote store when a vote overlaps another vote's cooldown.

    Only the store's cooldown constraint produces this error. Other
    integrity violations propagate unchanged.
    """

    pass
