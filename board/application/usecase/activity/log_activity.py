"""Log activity use case."""

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.repository import Transaction
from board.domain.service import ActivityService


class LogActivityRequest(BaseModel):
    """Record created event."""

    collection: str
    record_id: str


class LogActivityResponse(BaseModel):
    """Log activity response."""

    logged: bool
    text: str | None = None


class LogActivityUseCase(BaseUseCase[LogActivityRequest, LogActivityResponse]):
    """Use case for appending an activity when a record is created."""

    def __init__(
        self, activity_service: ActivityService, transaction: Transaction
    ) -> None:
        """Initialize log activity use case.

        Args:
            activity_service: Activity domain service
            transaction: Unit of work of the current scope
        """
        self.activity_service = activity_service
        self.transaction = transaction

    async def execute(self, request: LogActivityRequest) -> LogActivityResponse:
        """Execute log activity flow.

        Args:
            request: Collection name and ID of the created record

        Returns:
            Whether an activity was appended, and its text
        """
        activity = await self.activity_service.record_created(
            request.collection, request.record_id
        )
        if activity is None:
            return LogActivityResponse(logged=False)
        await self.transaction.commit()
        return LogActivityResponse(logged=True, text=activity.text)
