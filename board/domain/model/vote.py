"""Vote entity.

Each vote is a ledger row recording that a user upvoted a request.
The (user, request) pair is unique, which gates the counter increment.
"""

from datetime import datetime

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.value import RequestId, UserId, VoteId


class Vote(DomainModel):
    """Vote ledger entry.

    Business rules:
    - One vote per user per request (enforced by database unique constraint)
    - Votes are never deleted, not even when the user is deleted
    """

    id: VoteId
    user_id: UserId
    request_id: RequestId
    created_at: datetime = Field(default_factory=datetime.now)
