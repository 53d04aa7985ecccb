#!/usr/bin/env python3
"""Apply pending Alembic migrations before the API starts."""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from toplist.config import Settings
from toplist.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main(revision: str = "head") -> int:
    """Upgrade the database to ``revision``.

    A failure is logged and re-raised so the deployment stops before the
    API runs against an outdated schema.
    """
    settings = Settings()
    configure_logfire(settings)

    alembic_cfg = Config(str(ALEMBIC_INI))
    alembic_cfg.set_main_option("script_location", str(ALEMBIC_INI.parent / "migrations"))

    with logfire.span("run_migrations", revision=revision):
        try:
            command.upgrade(alembic_cfg, revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                revision=revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            raise

    logfire.info("Database migrations applied", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
