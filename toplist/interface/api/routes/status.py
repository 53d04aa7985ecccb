"""Server status routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from toplist.application.usecase.status import (
    CheckStatusRequest,
    CheckStatusResponse,
    CheckStatusUseCase,
)
from toplist.interface.error import ErrorResponse

router = APIRouter(tags=["status"], route_class=DishkaRoute)


@router.post(
    "/check-status",
    response_model=CheckStatusResponse,
    responses={400: {"model": ErrorResponse}},
)
async def check_status(
    request: CheckStatusRequest,
    check_status_use_case: FromDishka[CheckStatusUseCase],
) -> CheckStatusResponse:
    """Check whether a server website answers.

    Args:
        request: URL to probe
        check_status_use_case: Check status use case from DI

    Returns:
        online or offline
    """
    return await check_status_use_case.execute(request)
