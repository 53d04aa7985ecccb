"""Server directory routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from toplist.application.usecase.server import (
    GetGlobalStatsUseCase,
    GetRankingRequest,
    GetRankingResponse,
    GetRankingUseCase,
    GetServerUseCase,
    GlobalStatsResponse,
    ListServersResponse,
    ListServersUseCase,
    ServerInfo,
)
from toplist.domain.repository import ServerFilters
from toplist.domain.value import ServerSortOrder
from toplist.interface.error import ErrorResponse

router = APIRouter(tags=["servers"], route_class=DishkaRoute)


@router.get("/servers", response_model=ListServersResponse)
async def list_servers(
    list_servers_use_case: FromDishka[ListServersUseCase],
    name: str | None = Query(default=None, max_length=100),
    version: str | None = None,
    type: str | None = None,
    configuration: str | None = None,
    max_exp: int | None = Query(default=None, ge=0),
    sort: ServerSortOrder = ServerSortOrder.VOTES,
    limit: int = Query(default=50, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
) -> ListServersResponse:
    """List approved servers for the explore page.

    Args:
        list_servers_use_case: List servers use case from DI
        name: Case-insensitive name substring
        version: Exact game version
        type: Exact server type
        configuration: Exact configuration
        max_exp: Maximum experience rate
        sort: votes, newest or opening_soon
        limit: Maximum number of servers
        offset: Number of servers to skip

    Returns:
        Matching servers
    """
    filters = ServerFilters(
        name=name,
        version=version,
        type=type,
        configuration=configuration,
        max_exp=max_exp,
        sort=sort,
        limit=limit,
        offset=offset,
    )
    return await list_servers_use_case.execute(filters)


# Declared before /servers/{server_id} so "ranking" is not parsed as an id
@router.get("/servers/ranking", response_model=GetRankingResponse)
async def get_ranking(
    get_ranking_use_case: FromDishka[GetRankingUseCase],
    page: int = Query(default=1, ge=1),
    page_size: int = Query(default=15, ge=1, le=100),
) -> GetRankingResponse:
    """Get the vote ranking, one page at a time.

    Args:
        get_ranking_use_case: Get ranking use case from DI
        page: 1-based page number
        page_size: Servers per page

    Returns:
        Ranked servers with the total count
    """
    return await get_ranking_use_case.execute(
        GetRankingRequest(page=page, page_size=page_size)
    )


@router.get(
    "/servers/{server_id}",
    response_model=ServerInfo,
    responses={404: {"model": ErrorResponse}},
)
async def get_server(
    server_id: int,
    get_server_use_case: FromDishka[GetServerUseCase],
) -> ServerInfo:
    """Get a single server.

    Args:
        server_id: Server ID
        get_server_use_case: Get server use case from DI

    Returns:
        Server details
    """
    return await get_server_use_case.execute(server_id)


@router.get("/stats", response_model=GlobalStatsResponse)
async def get_stats(
    get_global_stats_use_case: FromDishka[GetGlobalStatsUseCase],
) -> GlobalStatsResponse:
    """Get directory-wide totals."""
    return await get_global_stats_use_case.execute()
