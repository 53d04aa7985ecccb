#!/usr/bin/env python3
"""Serve the toplist API under uvicorn, reporting startup failures to Logfire."""

import sys

import logfire
import uvicorn

from toplist.config import Settings
from toplist.util.logging import setup_logging
from toplist.util.observability import configure_logfire


def main() -> int:
    """Configure logging, then run uvicorn until it exits."""
    settings = Settings()

    # Logfire first so import errors in the app module are captured
    configure_logfire(settings)
    setup_logging(settings)

    bind_host = "127.0.0.1" if settings.environment == "development" else "0.0.0.0"

    try:
        logfire.info(
            "Starting toplist API",
            environment=settings.environment,
            git_sha=settings.git_sha,
            port=settings.port,
        )
        uvicorn.run(
            "toplist.interface.api.app:app",
            host=bind_host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
            proxy_headers=True,
        )
        return 0

    except Exception as e:
        logfire.error(
            "API startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
