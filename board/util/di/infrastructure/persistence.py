"""Persistence component: PostgreSQL engine, sessions and repositories."""

from collections.abc import AsyncGenerator, AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from board.config import Settings
from board.domain.repository import (
    ActivityRepository,
    RequestRepository,
    Transaction,
    UserRepository,
    VoteRepository,
)
from board.persistence.database import create_engine, create_session_factory
from board.persistence.repository import (
    PostgresActivityRepository,
    PostgresRequestRepository,
    PostgresTransaction,
    PostgresUserRepository,
    PostgresVoteRepository,
)
from board.util.di.base import ProviderBase
from board.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Mockable persistence component; tests swap in in-memory repositories."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL repositories over one session per request scope."""

    __is_mock__ = False

    # Repositories only need the session, which dishka resolves by type
    users = provide(
        PostgresUserRepository, provides=UserRepository, scope=Scope.REQUEST
    )
    requests = provide(
        PostgresRequestRepository, provides=RequestRepository, scope=Scope.REQUEST
    )
    votes = provide(
        PostgresVoteRepository, provides=VoteRepository, scope=Scope.REQUEST
    )
    activities = provide(
        PostgresActivityRepository, provides=ActivityRepository, scope=Scope.REQUEST
    )
    transaction = provide(
        PostgresTransaction, provides=Transaction, scope=Scope.REQUEST
    )

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Engine shared by the whole process, disposed with the container."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncGenerator[AsyncSession, BaseException | None]:
        """One transaction per request scope.

        Write use cases commit through ``Transaction`` before they return.
        Whatever is still uncommitted when the scope closes is rolled back,
        so a write that failed halfway never lands. Handled domain errors
        close the scope cleanly too, so a clean exit does not commit.

        dishka sends the exception the scope closed with, if any, back into
        this generator.
        """
        async with session_factory() as session:
            exception = yield session
            await session.rollback()
            if exception is not None:
                logfire.warn(
                    "Transaction rolled back", error_type=type(exception).__name__
                )
