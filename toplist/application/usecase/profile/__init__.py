"""Profile use cases."""

from .get_email import GetEmailFromUsernameUseCase, GetEmailRequest, GetEmailResponse

__all__ = [
    "GetEmailFromUsernameUseCase",
    "GetEmailRequest",
    "GetEmailResponse",
]
