#!/usr/bin/env python3
"""Upgrade the Materia database schema to the latest revision."""

import sys

import logfire
from alembic import command
from alembic.config import Config

from materia.config import Settings
from materia.util.logging import setup_logging
from materia.util.observability import configure_logfire


def main() -> int:
    """Run pending migrations, logging failures to Logfire."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    with logfire.span("run_migrations", environment=settings.environment):
        try:
            command.upgrade(Config("alembic.ini"), "head")
        except Exception as e:
            logfire.error(
                "Database migration failed",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # The API must not start against a stale schema
            raise

    logfire.info("Database migrations completed successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())
