"""In-memory request repository for testing."""

from typing import Optional

from board.domain.model.request import Request
from board.domain.repository.request import RequestRepository
from board.domain.value import RequestId

from .store import InMemoryStore


class InMemoryRequestRepository(RequestRepository):
    """In-memory implementation of RequestRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, request_id: RequestId) -> Optional[Request]:
        """Find a request by ID."""
        return self._store.requests.get(request_id)

    async def find_all(self, limit: int = 100, offset: int = 0) -> list[Request]:
        """Find requests ordered by upvotes, then creation time."""
        ordered = sorted(
            self._store.requests.values(),
            key=lambda r: (-r.upvotes, r.created_at),
        )
        return ordered[offset : offset + limit]

    async def save(self, request: Request) -> Request:
        """Save a request."""
        self._store.requests[request.id] = request
        return request

    async def increment_upvotes(self, request_id: RequestId) -> None:
        """Increment upvotes by 1."""
        request = self._store.requests.get(request_id)
        if request:
            self._store.requests[request_id] = request.model_copy(
                update={"upvotes": request.upvotes + 1}
            )
