"""Async engine and session factory for PostgreSQL."""

from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from board.config import DatabaseSettings, Settings


def engine_options(database: DatabaseSettings, echo: bool = False) -> dict[str, Any]:
    """Engine keyword arguments derived from database settings.

    ``command_timeout`` is handed to asyncpg, which cancels any single
    statement running longer than that many seconds.
    """
    return {
        "echo": echo,
        "pool_pre_ping": True,
        "pool_size": database.pool_size,
        "max_overflow": database.max_overflow,
        "connect_args": {"command_timeout": database.command_timeout},
    }


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the application's async engine."""
    return create_async_engine(
        settings.database_url, **engine_options(settings.database, echo=settings.debug)
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the session factory used for request-scoped sessions.

    Objects are not expired on commit because repositories return pydantic
    models, never ORM instances, and autoflush is off since every repository
    write flushes explicitly.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
