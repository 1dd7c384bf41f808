"""Best-effort activity notifier.

Record-created side effects run outside the triggering request's
transaction: each notification opens its own DI request scope, and so its
own database session. Failures are logged and dropped so they can never
roll back or block the write that caused them.
"""

import logfire
from dishka import AsyncContainer

from board.application.usecase.activity import LogActivityRequest, LogActivityUseCase
from board.domain.value import CollectionName


class ActivityNotifier:
    """Emits record-created events to the activity log."""

    def __init__(self, container: AsyncContainer) -> None:
        """Initialize notifier.

        Args:
            container: APP-scoped DI container to open request scopes from
        """
        self.container = container

    async def record_created(
        self, collection: CollectionName | str, record_id: str
    ) -> bool:
        """Log the creation of a record.

        Args:
            collection: Collection the record was created in
            record_id: ID of the created record

        Returns:
            True if an activity was appended, False otherwise (including
            on failure)
        """
        name = collection.value if isinstance(collection, CollectionName) else collection
        with logfire.span(
            "activity_notifier.record_created", collection=name, record_id=record_id
        ):
            try:
                async with self.container() as request_container:
                    use_case = await request_container.get(LogActivityUseCase)
                    response = await use_case.execute(
                        LogActivityRequest(collection=name, record_id=record_id)
                    )
                return response.logged
            except Exception:
                logfire.exception(
                    "Activity logging failed", collection=name, record_id=record_id
                )
                return False
