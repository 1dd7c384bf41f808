"""Activity domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from board.domain.model import Activity
from board.domain.repository import ActivityRepository
from board.domain.value import ActivityId, CollectionName

from .base import Service

ACTIVITY_MESSAGES: dict[CollectionName, str] = {
    CollectionName.REQUESTS: "A new request has been added.",
    CollectionName.USERS: "A new user has signed up.",
}


class ActivityService(Service):
    """Domain service for the activity log."""

    def __init__(self, activity_repository: ActivityRepository) -> None:
        """Initialize activity service.

        Args:
            activity_repository: Activity repository
        """
        self.activity_repository = activity_repository

    async def record_created(
        self, collection: str, record_id: str
    ) -> Optional[Activity]:
        """Append a log entry for a newly created record.

        Args:
            collection: Name of the collection the record was created in
            record_id: ID of the created record

        Returns:
            The appended activity, or None for collections that are not logged
        """
        with logfire.span(
            "activity_service.record_created",
            collection=collection,
            record_id=record_id,
        ):
            try:
                message = ACTIVITY_MESSAGES.get(CollectionName(collection))
            except ValueError:
                message = None

            if message is None:
                logfire.debug("Collection not logged", collection=collection)
                return None

            activity = Activity(
                id=ActivityId(uuid4()), text=message, created_at=datetime.now()
            )
            return await self.activity_repository.add(activity)

    async def list_activities(self) -> list[Activity]:
        """List all activities in insertion order.

        No route reads the log; this is for verification and tooling.
        """
        return await self.activity_repository.find_all()
