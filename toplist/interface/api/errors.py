"""Exception handlers translating errors into ``{"error": ...}`` responses."""

from typing import Any

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from toplist.domain.error import DomainError, RateLimitedError
from toplist.interface.error import (
    INTERNAL_ERROR_MESSAGE,
    ErrorResponse,
    status_code_for,
)


def _error_response(
    status_code: int, message: str, headers: dict[str, str] | None = None
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
        headers=headers,
    )


def validation_message(errors: list[dict[str, Any]]) -> str:
    """Summarize request validation errors as a single sentence.

    Only the first error is reported.

    Args:
        errors: Errors from ``RequestValidationError.errors()``

    Returns:
        Human-readable message
    """
    if not errors:
        return "Invalid request."

    first = errors[0]
    # loc is ("body", "serverId") or ("query", "page"); ("body",) for no body
    loc = [str(part) for part in first.get("loc", ())[1:]]
    field = ".".join(loc)
    error_type = first.get("type", "")

    if error_type == "json_invalid":
        return "Request body is not valid JSON."
    if not field:
        if error_type == "missing":
            return "Request body is required."
        return f"Invalid request body: {first.get('msg', 'invalid value')}."
    if error_type == "missing":
        return f"{field} is required."
    return f"Invalid {field}: {first.get('msg', 'invalid value')}."


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Map domain errors to their HTTP status."""
    status_code = status_code_for(exc)
    headers = None

    if isinstance(exc, RateLimitedError):
        headers = {"Retry-After": str(exc.retry_after)}

    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logfire.error(
            "Request failed", path=request.url.path, error=str(exc), _exc_info=exc
        )
    else:
        logfire.info(
            "Request rejected",
            path=request.url.path,
            status_code=status_code,
            error=str(exc),
        )

    return _error_response(status_code, str(exc), headers)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report request validation failures as 400 instead of 422."""
    message = validation_message(list(exc.errors()))
    logfire.info("Invalid request", path=request.url.path, error=message)
    return _error_response(status.HTTP_400_BAD_REQUEST, message)


async def http_error_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Wrap framework HTTP errors (404 route, 405 method) in the error body."""
    return _error_response(exc.status_code, str(exc.detail), exc.headers)


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Log unexpected database failures and hide their details."""
    logfire.error(
        "Database error",
        path=request.url.path,
        error_type=type(exc).__name__,
        _exc_info=exc,
    )
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE
    )


async def unhandled_error_middleware(
    request: Request, call_next: RequestResponseEndpoint
) -> Response:
    """Turn any exception no handler claimed into a 500 error body.

    Starlette serves ``Exception`` handlers from the outermost middleware,
    past CORS, so unexpected failures are caught here instead.
    """
    try:
        return await call_next(request)
    except Exception as exc:
        logfire.error(
            "Unhandled error",
            path=request.url.path,
            error_type=type(exc).__name__,
            _exc_info=exc,
        )
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE
        )


def register_error_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the application.

    Handlers are bound to concrete exception classes so responses still
    pass through the CORS middleware.

    Anything else is caught by a middleware, so it must be called before
    the CORS middleware is added.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_middleware(BaseHTTPMiddleware, dispatch=unhandled_error_middleware)
