"""Domain layer DI providers."""

from datetime import timedelta

from dishka import Scope, provide

from toplist.config import AuthSettings, VotingSettings
from toplist.domain.repository import (
    ProfileRepository,
    ServerRepository,
    VoteRepository,
)
from toplist.domain.service import (
    Clock,
    JWTService,
    ProfileService,
    ServerService,
    StatusProbe,
    StatusService,
    VoteService,
)
from toplist.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_server_service(self, server_repository: ServerRepository) -> ServerService:
        """Provide server domain service."""
        return ServerService(server_repository=server_repository)

    @provide
    def get_profile_service(
        self, profile_repository: ProfileRepository
    ) -> ProfileService:
        """Provide profile domain service."""
        return ProfileService(profile_repository=profile_repository)

    @provide
    def get_status_service(self, status_probe: StatusProbe) -> StatusService:
        """Provide status domain service."""
        return StatusService(status_probe=status_probe)

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        server_service: ServerService,
        clock: Clock,
        voting_settings: VotingSettings,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            server_service=server_service,
            clock=clock,
            cooldown=timedelta(hours=voting_settings.cooldown_hours),
        )
