"""Application layer DI providers."""

from dishka import Scope, provide

from toplist.application.usecase.profile import GetEmailFromUsernameUseCase
from toplist.application.usecase.server import (
    GetGlobalStatsUseCase,
    GetRankingUseCase,
    GetServerUseCase,
    ListServersUseCase,
)
from toplist.application.usecase.status import CheckStatusUseCase
from toplist.application.usecase.vote import VoteServerUseCase
from toplist.domain.service import (
    Clock,
    JWTService,
    ProfileService,
    ServerService,
    StatusService,
    VoteService,
)
from toplist.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_vote_server_use_case(
        self, jwt_service: JWTService, vote_service: VoteService
    ) -> VoteServerUseCase:
        """Provide vote server use case."""
        return VoteServerUseCase(jwt_service=jwt_service, vote_service=vote_service)

    # Server directory use cases
    @provide(scope=Scope.REQUEST)
    def get_list_servers_use_case(
        self, server_service: ServerService, clock: Clock
    ) -> ListServersUseCase:
        """Provide list servers use case."""
        return ListServersUseCase(server_service=server_service, clock=clock)

    @provide(scope=Scope.REQUEST)
    def get_ranking_use_case(self, server_service: ServerService) -> GetRankingUseCase:
        """Provide get ranking use case."""
        return GetRankingUseCase(server_service=server_service)

    @provide(scope=Scope.REQUEST)
    def get_server_use_case(self, server_service: ServerService) -> GetServerUseCase:
        """Provide get server use case."""
        return GetServerUseCase(server_service=server_service)

    @provide(scope=Scope.REQUEST)
    def get_global_stats_use_case(
        self, server_service: ServerService, profile_service: ProfileService
    ) -> GetGlobalStatsUseCase:
        """Provide get global stats use case."""
        return GetGlobalStatsUseCase(
            server_service=server_service, profile_service=profile_service
        )

    # Status use cases
    @provide(scope=Scope.REQUEST)
    def get_check_status_use_case(
        self, status_service: StatusService
    ) -> CheckStatusUseCase:
        """Provide check status use case."""
        return CheckStatusUseCase(status_service=status_service)

    # Profile use cases
    @provide(scope=Scope.REQUEST)
    def get_email_from_username_use_case(
        self, profile_service: ProfileService
    ) -> GetEmailFromUsernameUseCase:
        """Provide get email from username use case."""
        return GetEmailFromUsernameUseCase(profile_service=profile_service)
