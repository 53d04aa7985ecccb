"""Vote routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header
from pydantic import BaseModel, ConfigDict, Field

from toplist.application.usecase.vote import (
    VoteServerRequest,
    VoteServerResponse,
    VoteServerUseCase,
)
from toplist.interface.error import ErrorResponse

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class VoteServerAPIRequest(BaseModel):
    """API request for voting for a server."""

    model_config = ConfigDict(populate_by_name=True)

    server_id: int = Field(alias="serverId", strict=True, gt=0)


@router.post(
    "/vote-server",
    response_model=VoteServerResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
    },
)
async def vote_server(
    request: VoteServerAPIRequest,
    vote_server_use_case: FromDishka[VoteServerUseCase],
    authorization: str | None = Header(default=None),
) -> VoteServerResponse:
    """Vote for a server.

    Requires a bearer token. One vote per user and server every 24 hours.

    Args:
        request: Target server
        vote_server_use_case: Vote server use case from DI
        authorization: ``Bearer <token>`` header

    Returns:
        Confirmation message
    """
    return await vote_server_use_case.execute(
        VoteServerRequest(authorization=authorization, server_id=request.server_id)
    )
