"""PostgreSQL implementation of Request repository."""

from typing import List, Optional

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.model import Request
from board.domain.repository import RequestRepository
from board.domain.value import RequestId
from board.persistence.mappers import request_to_dict, row_to_request
from board.persistence.tables import requests_table


class PostgresRequestRepository(RequestRepository):
    """PostgreSQL implementation of RequestRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, request_id: RequestId) -> Optional[Request]:
        """Find a request by ID."""
        stmt = select(requests_table).where(requests_table.c.id == request_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_request(dict(row)) if row else None

    async def find_all(self, limit: int = 100, offset: int = 0) -> List[Request]:
        """Find requests ordered by upvotes, then creation time."""
        stmt = (
            select(requests_table)
            .order_by(requests_table.c.upvotes.desc(), requests_table.c.created_at)
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_request(dict(row)) for row in result.mappings().all()]

    async def save(self, request: Request) -> Request:
        """Insert a new request."""
        stmt = insert(requests_table).values(**request_to_dict(request))
        await self.session.execute(stmt)
        await self.session.flush()
        return request

    async def increment_upvotes(self, request_id: RequestId) -> None:
        """Atomically increment upvotes by 1."""
        stmt = (
            requests_table.update()
            .where(requests_table.c.id == request_id)
            .values(upvotes=requests_table.c.upvotes + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()
