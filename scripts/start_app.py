#!/usr/bin/env python3
"""Start the API with Logfire tracking of startup errors."""

import sys

import logfire
import uvicorn

from bunko.config import Settings
from bunko.util.logging import setup_logging
from bunko.util.observability import configure_logfire


def main() -> int:
    """Configure observability, then serve the app factory with uvicorn."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        logfire.info("Starting Bunko API", environment=settings.environment)
        uvicorn.run(
            "bunko.interface.api.app:create_app",
            factory=True,
            host="0.0.0.0",
            port=8000,
            log_level="debug" if settings.debug else "info",
        )
        return 0

    except Exception as e:
        # A ConfigurationError from the content registry lands here
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
