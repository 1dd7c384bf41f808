"""PostgreSQL transaction over the request-scoped session."""

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.repository import Transaction


class PostgresTransaction(Transaction):
    """Commits the session the repositories of the same scope write through."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def commit(self) -> None:
        with logfire.span("transaction.commit"):
            await self.session.commit()
