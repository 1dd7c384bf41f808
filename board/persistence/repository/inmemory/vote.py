"""In-memory vote repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from board.domain.model.vote import Vote
from board.domain.repository.vote import VoteRepository
from board.domain.value import RequestId, UserId

from .store import InMemoryStore


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    def _find(self, user_id: UserId, request_id: RequestId) -> Optional[Vote]:
        for vote in self._store.votes:
            if vote.user_id == user_id and vote.request_id == request_id:
                return vote
        return None

    async def find_by_user_and_request(
        self, user_id: UserId, request_id: RequestId
    ) -> Optional[Vote]:
        """Find a vote by user and request."""
        return self._find(user_id, request_id)

    async def find_by_user(self, user_id: UserId) -> list[Vote]:
        """Find all votes by a user."""
        return [v for v in self._store.votes if v.user_id == user_id]

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If vote already exists (duplicate)
        """
        if self._find(vote.user_id, vote.request_id):
            raise IntegrityError("Duplicate vote", None, Exception())

        self._store.votes.append(vote)
        return vote

    async def count_by_request(self, request_id: RequestId) -> int:
        """Count votes for a request."""
        return sum(1 for v in self._store.votes if v.request_id == request_id)
