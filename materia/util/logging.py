"""Standard library logging setup.

Application events go through logfire; this only sets the levels of the
libraries that log through the standard ``logging`` module.
"""

import logging
import sys

from materia.config import Settings

# Libraries that are too chatty at the application level
QUIET_LOGGERS = ("asyncpg", "sqlalchemy.engine", "uvicorn.access", "alembic.runtime")


def log_level(settings: Settings) -> int:
    """Root log level for an environment."""
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "test":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Configure the root logger and quiet noisy libraries.

    Args:
        settings: Application settings
    """
    level = log_level(settings)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        stream=sys.stdout,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    logging.getLogger(__name__).info(
        "Logging configured for %s at %s", settings.environment, logging.getLevelName(level)
    )
