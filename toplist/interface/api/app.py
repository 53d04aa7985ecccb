"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from toplist.config import Settings
from toplist.interface.api.errors import register_error_handlers
from toplist.interface.api.routes import (
    health,
    profiles,
    servers,
    status,
    votes,
)
from toplist.util.di.container import create_container, setup_di
from toplist.util.observability import (
    instrument_fastapi,
    instrument_httpx,
)


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use; the production container is
            built when omitted (tests pass a mock container)
    """
    settings = Settings()

    # Instrument httpx for outbound status probe requests
    instrument_httpx()

    app_instance = FastAPI(
        title="Toplist API",
        description="Backend API for the game server toplist: voting, rankings and the server directory",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    # Registered before CORS so its middleware runs inside it
    register_error_handlers(app_instance)

    # Public endpoints are called from any site, bearer tokens only (no cookies)
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allow_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=settings.cors.allow_headers,
        max_age=600,
    )

    if container is None:
        container = create_container()
    setup_di(app_instance, container)

    app_instance.include_router(health.router)
    app_instance.include_router(votes.router)
    app_instance.include_router(status.router)
    app_instance.include_router(profiles.router)
    app_instance.include_router(servers.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
