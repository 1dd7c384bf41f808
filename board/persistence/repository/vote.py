"""PostgreSQL vote ledger."""

from typing import List, Optional

from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.model import Vote
from board.domain.repository import VoteRepository
from board.domain.value import RequestId, UserId
from board.persistence.mappers import row_to_vote, vote_to_dict
from board.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """Ledger backed by the ``votes`` table and its ``unique_vote`` constraint.

    Only ``save`` is on the upvote path; the reads serve verification and
    tooling.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, vote: Vote) -> Vote:
        """Insert a ledger row.

        The flush makes PostgreSQL check ``unique_vote`` now. A concurrent
        insert of the same pair blocks here until the other transaction
        ends, then fails with IntegrityError if it committed.
        """
        await self.session.execute(insert(votes_table).values(**vote_to_dict(vote)))
        await self.session.flush()
        return vote

    async def find_by_user_and_request(
        self, user_id: UserId, request_id: RequestId
    ) -> Optional[Vote]:
        stmt = select(votes_table).where(
            votes_table.c.user_id == user_id,
            votes_table.c.request_id == request_id,
        )
        row = (await self.session.execute(stmt)).mappings().first()
        return row_to_vote(dict(row)) if row else None

    async def find_by_user(self, user_id: UserId) -> List[Vote]:
        stmt = (
            select(votes_table)
            .where(votes_table.c.user_id == user_id)
            .order_by(votes_table.c.created_at)
        )
        rows = (await self.session.execute(stmt)).mappings().all()
        return [row_to_vote(dict(row)) for row in rows]

    async def count_by_request(self, request_id: RequestId) -> int:
        stmt = select(func.count()).where(votes_table.c.request_id == request_id)
        return (await self.session.execute(stmt)).scalar_one()
