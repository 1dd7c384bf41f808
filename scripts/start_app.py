#!/usr/bin/env python3
"""Serve the API with uvicorn.

Logfire is configured here, before uvicorn imports the app module, so that
instrumentation applied in ``create_app`` and any import-time failure are
both captured.
"""

import sys
import logfire
import uvicorn

from board.config import Settings
from board.util.logging import get_logger, setup_logging
from board.util.observability import configure_logfire

APP_PATH = "board.interface.api.app:app"

logger = get_logger(__name__)


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    logger.info("Serving %s on %s:%s", APP_PATH, settings.host, settings.port)
    try:
        uvicorn.run(
            APP_PATH,
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
            log_config=None,  # keep the handlers installed by setup_logging
        )
    except Exception as e:
        logfire.error(
            "Application startup failed",
            git_sha=settings.git_sha,
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
