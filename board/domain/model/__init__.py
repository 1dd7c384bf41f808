"""Domain model entities for the feature board."""

from board.domain.model.activity import Activity
from board.domain.model.request import Request
from board.domain.model.user import User
from board.domain.model.vote import Vote

__all__ = [
    "User",
    "Request",
    "Vote",
    "Activity",
]
