"""Console logging configuration.

Application events go through logfire; this sets up the stdlib root logger
for uvicorn, alembic and SQLAlchemy output.
"""

import logging
import sys

from bunko.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure stdlib logging for the environment.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    # SQL echo is controlled by settings.debug on the engine itself
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    if settings.environment == "production":
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    logging.getLogger("bunko").setLevel(level)

    get_logger(__name__).info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
