"""Domain value objects for the feature board."""

from board.domain.value.identifiers import ActivityId, RequestId, UserId, VoteId
from board.domain.value.types import CallerIdentity, CollectionName

__all__ = [
    # Identifiers
    "UserId",
    "RequestId",
    "VoteId",
    "ActivityId",
    # Types
    "CallerIdentity",
    "CollectionName",
]
