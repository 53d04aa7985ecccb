"""Logfire setup and instrumentation.

Structured events and spans go through Logfire directly:

    logfire.info("Vote accepted", user_id=str(user_id), server_id=server_id)

    with logfire.span("vote_service.cast_vote", server_id=server_id):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from toplist.config import Settings

SERVICE_NAME = "toplist-api"
SERVICE_VERSION = "0.1.0"

# Never record the health probe; load balancers hit it every few seconds
EXCLUDED_URLS = ["/health"]


def _send_to_logfire(settings: Settings) -> bool:
    """Explicit setting wins, otherwise send only when a token is configured."""
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once at process start.

    Args:
        settings: Application settings
    """
    send = _send_to_logfire(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
        # Bearer tokens and looked-up emails stay out of telemetry
        scrubbing=logfire.ScrubbingOptions(extra_patterns=["authorization", "email"]),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        git_sha=settings.git_sha,
        send_to_logfire=send,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request handled by the app.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        excluded_urls=EXCLUDED_URLS,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace queries issued through the engine.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
    logfire.info("SQLAlchemy instrumented")


def instrument_httpx() -> None:
    """Trace outbound requests made by the status probe."""
    logfire.instrument_httpx()
