"""PostgreSQL repository implementations."""

from board.persistence.repository.activity import PostgresActivityRepository
from board.persistence.repository.request import PostgresRequestRepository
from board.persistence.repository.transaction import PostgresTransaction
from board.persistence.repository.user import PostgresUserRepository
from board.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresActivityRepository",
    "PostgresRequestRepository",
    "PostgresTransaction",
    "PostgresUserRepository",
    "PostgresVoteRepository",
]
