"""Standard-library logging for scripts and third-party libraries.

Application code emits through logfire directly. This module makes sure
records from uvicorn, alembic and our own scripts land in the same place.
"""

import logging
import sys

import logfire

from board.config import Settings

LEVELS_BY_ENVIRONMENT = {
    "test": logging.WARNING,
    "development": logging.INFO,
    "staging": logging.INFO,
    "production": logging.WARNING,
}

# Libraries that log per query or per request at INFO
NOISY_LOGGERS = ("sqlalchemy.engine", "uvicorn.access", "asyncpg")


def setup_logging(settings: Settings) -> None:
    """Configure the root logger.

    Records go to stdout and are also forwarded to logfire, so they show up
    next to the spans of the request that produced them.

    Args:
        settings: Application settings
    """
    if settings.debug:
        level = logging.DEBUG
    else:
        level = LEVELS_BY_ENVIRONMENT[settings.environment]

    stdout = logging.StreamHandler(sys.stdout)
    stdout.setFormatter(
        logging.Formatter(
            "%(asctime)s %(levelname)-7s %(name)s: %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )

    logging.basicConfig(
        level=level,
        handlers=[stdout, logfire.LogfireLoggingHandler()],
        force=True,
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    get_logger(__name__).info(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )


def get_logger(name: str) -> logging.Logger:
    """Return a stdlib logger, typically for ``__name__``."""
    return logging.getLogger(name)
