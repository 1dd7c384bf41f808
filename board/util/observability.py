"""Logfire setup and instrumentation.

Domain services open spans named ``<service>.<operation>`` and log
structured events with ids as attributes:

    with logfire.span("vote_service.upvote", user_id=user_id):
        logfire.info("Request upvoted", request_id=str(request_id))
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from board.config import Settings

SERVICE_NAME = "feature-board"
SERVICE_VERSION = "0.1.0"

# Polled by load balancers; tracing it only adds noise
UNTRACED_URLS = "/health"


def should_send(settings: Settings) -> bool:
    """Decide whether spans leave the process.

    An explicit OBSERVABILITY__SEND_TO_LOGFIRE wins; otherwise sending is on
    exactly when a token is configured.
    """
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure logfire once per process, before the app is imported.

    Args:
        settings: Application settings
    """
    send = should_send(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        git_sha=settings.git_sha,
        send_to_logfire=send,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request except health checks."""
    logfire.instrument_fastapi(app, excluded_urls=UNTRACED_URLS)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements issued through the engine.

    Statements carry a comment with the active span context so slow queries
    can be matched to the request that issued them.
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
