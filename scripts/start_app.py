#!/usr/bin/env python3
"""Start the Materia API, reporting startup failures to Logfire."""

import sys

import logfire
import uvicorn

from materia.config import Settings
from materia.util.logging import setup_logging
from materia.util.observability import configure_logfire


def main() -> int:
    """Configure logging and observability, then serve the API."""
    settings = Settings()

    setup_logging(settings)
    # Before the app module is imported, so startup errors are captured
    configure_logfire(settings)

    try:
        logfire.info("Starting Materia API", environment=settings.environment)

        uvicorn.run(
            "materia.interface.api.app:app",
            host="0.0.0.0",
            port=8000,
            log_level="debug" if settings.debug else "info",
        )

        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
