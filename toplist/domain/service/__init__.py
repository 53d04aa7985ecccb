"""Domain services."""

from .base import Service
from .clock import Clock
from .jwt_service import JWTService
from .profile_service import ProfileService
from .server_service import ServerService
from .status_service import StatusProbe, StatusService
from .vote_service import COOLDOWN_MESSAGE, VoteService

__all__ = [
    "COOLDOWN_MESSAGE",
    "Clock",
    "JWTService",
    "ProfileService",
    "Service",
    "ServerService",
    "StatusProbe",
    "StatusService",
    "VoteService",
]
