"""Request repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from board.domain.model.request import Request
from board.domain.value import RequestId


class RequestRepository(ABC):
    """Repository for Request entity.

    Defines the contract for request persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, request_id: RequestId) -> Optional[Request]:
        """Find a request by ID.

        Args:
            request_id: The request's unique identifier

        Returns:
            The request if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, limit: int = 100, offset: int = 0) -> List[Request]:
        """Find requests ordered by upvotes (most first), then age.

        Args:
            limit: Maximum number of requests to return
            offset: Number of requests to skip

        Returns:
            List of requests
        """
        pass

    @abstractmethod
    async def save(self, request: Request) -> Request:
        """Save a new request.

        Args:
            request: The request to save

        Returns:
            The saved request
        """
        pass

    @abstractmethod
    async def increment_upvotes(self, request_id: RequestId) -> None:
        """Atomically increment upvotes by 1.

        Uses SQL-level increment to avoid race conditions.

        Args:
            request_id: The request ID
        """
        pass
