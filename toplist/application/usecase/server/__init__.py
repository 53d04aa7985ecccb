"""Server directory use cases."""

from .common import ServerInfo
from .get_ranking import (
    GetRankingRequest,
    GetRankingResponse,
    GetRankingUseCase,
    RankedServerInfo,
)
from .get_server import GetServerUseCase
from .get_stats import GetGlobalStatsUseCase, GlobalStatsResponse
from .list_servers import ListServersResponse, ListServersUseCase

__all__ = [
    "GetGlobalStatsUseCase",
    "GetRankingRequest",
    "GetRankingResponse",
    "GetRankingUseCase",
    "GetServerUseCase",
    "GlobalStatsResponse",
    "ListServersResponse",
    "ListServersUseCase",
    "RankedServerInfo",
    "ServerInfo",
]
