"""PostgreSQL implementation of Activity repository."""

from typing import List

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.model import Activity
from board.domain.repository import ActivityRepository
from board.persistence.mappers import activity_to_dict, row_to_activity
from board.persistence.tables import activities_table


class PostgresActivityRepository(ActivityRepository):
    """PostgreSQL implementation of ActivityRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def add(self, activity: Activity) -> Activity:
        """Append an activity."""
        stmt = insert(activities_table).values(**activity_to_dict(activity))
        await self.session.execute(stmt)
        await self.session.flush()
        return activity

    async def find_all(self) -> List[Activity]:
        """Find all activities in insertion order."""
        stmt = select(activities_table).order_by(activities_table.c.created_at)
        result = await self.session.execute(stmt)
        return [row_to_activity(dict(row)) for row in result.mappings().all()]
