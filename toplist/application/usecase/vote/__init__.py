"""Vote use cases."""

from .vote_server import VoteServerRequest, VoteServerResponse, VoteServerUseCase

__all__ = [
    "VoteServerRequest",
    "VoteServerResponse",
    "VoteServerUseCase",
]
