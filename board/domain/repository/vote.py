"""Vote ledger repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from board.domain.model.vote import Vote
from board.domain.value import RequestId, UserId


class VoteRepository(ABC):
    """Ledger of accepted upvotes, one row per (user, request) pair.

    The ledger is the arbiter between concurrent upvotes by the same user:
    ``save`` must fail for a pair that already has a row, even when the
    competing row was written by a transaction that has not yet committed.

    The upvote path only calls ``save``. The read methods exist for
    verification and maintenance tooling, e.g. reconciling counters.
    """

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Insert a ledger row.

        Raises:
            IntegrityError: If the pair already has a row
        """
        pass

    @abstractmethod
    async def find_by_user_and_request(
        self, user_id: UserId, request_id: RequestId
    ) -> Optional[Vote]:
        """Return the ledger row for a pair, if any (verification only)."""
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> List[Vote]:
        """Return a user's ledger rows, oldest first (verification only).

        Rows outlive the user record they were written for.
        """
        pass

    @abstractmethod
    async def count_by_request(self, request_id: RequestId) -> int:
        """Number of ledger rows for a request (verification only).

        Always equals the request's ``upvotes`` counter.
        """
        pass
