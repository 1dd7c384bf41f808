"""In-memory repository implementations for testing."""

from .activity import InMemoryActivityRepository
from .request import InMemoryRequestRepository
from .store import InMemoryStore
from .transaction import InMemoryTransaction
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryActivityRepository",
    "InMemoryRequestRepository",
    "InMemoryStore",
    "InMemoryTransaction",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
