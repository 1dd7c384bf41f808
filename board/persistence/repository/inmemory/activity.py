"""In-memory activity repository for testing."""

from board.domain.model.activity import Activity
from board.domain.repository.activity import ActivityRepository

from .store import InMemoryStore


class InMemoryActivityRepository(ActivityRepository):
    """In-memory implementation of ActivityRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def add(self, activity: Activity) -> Activity:
        """Append an activity."""
        self._store.activities.append(activity)
        return activity

    async def find_all(self) -> list[Activity]:
        """Find all activities in insertion order."""
        return list(self._store.activities)
