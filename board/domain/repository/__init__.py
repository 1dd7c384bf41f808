"""Repository interfaces for the feature board domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from board.domain.repository.activity import ActivityRepository
from board.domain.repository.request import RequestRepository
from board.domain.repository.transaction import Transaction
from board.domain.repository.user import UserRepository
from board.domain.repository.vote import VoteRepository

__all__ = [
    "ActivityRepository",
    "RequestRepository",
    "Transaction",
    "UserRepository",
    "VoteRepository",
]
