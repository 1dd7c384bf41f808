"""Activity repository interface."""

from abc import ABC, abstractmethod
from typing import List

from board.domain.model.activity import Activity


class ActivityRepository(ABC):
    """Append-only repository for activity log entries."""

    @abstractmethod
    async def add(self, activity: Activity) -> Activity:
        """Append an activity.

        Args:
            activity: The activity to append

        Returns:
            The stored activity
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Activity]:
        """Find all activities in insertion order.

        Returns:
            List of activities
        """
        pass
