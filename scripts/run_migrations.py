#!/usr/bin/env python3
"""Upgrade the database schema before the API starts.

Usage: run_migrations.py [REVISION]   (defaults to "head")
"""

import sys
import logfire
from alembic import command
from alembic.config import Config

from board.config import Settings
from board.util.logging import get_logger, setup_logging
from board.util.observability import configure_logfire

logger = get_logger(__name__)


def main(argv: list[str]) -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    revision = argv[1] if len(argv) > 1 else "head"

    with logfire.span("migrations.upgrade", revision=revision):
        try:
            command.upgrade(Config("alembic.ini"), revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                revision=revision,
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Fail the deploy rather than serve against a half-migrated schema
            raise

    logger.info("Schema is at %s", revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
