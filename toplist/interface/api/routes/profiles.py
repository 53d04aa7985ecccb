"""Profile routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from toplist.application.usecase.profile import (
    GetEmailFromUsernameUseCase,
    GetEmailRequest,
    GetEmailResponse,
)
from toplist.interface.error import ErrorResponse

router = APIRouter(tags=["profiles"], route_class=DishkaRoute)


@router.post(
    "/get-email-from-username",
    response_model=GetEmailResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def get_email_from_username(
    request: GetEmailRequest,
    get_email_use_case: FromDishka[GetEmailFromUsernameUseCase],
) -> GetEmailResponse:
    """Resolve a username to the account email for username sign-in.

    Args:
        request: Username to look up
        get_email_use_case: Get email use case from DI

    Returns:
        Email address of the profile
    """
    return await get_email_use_case.execute(request)
