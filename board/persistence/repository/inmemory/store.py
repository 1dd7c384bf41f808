"""Shared state for in-memory repositories."""

from dataclasses import dataclass, field

from board.domain.model import Activity, Request, User, Vote
from board.domain.value import RequestId, UserId


@dataclass
class InMemoryStore:
    """Backing collections shared by all in-memory repositories of a container.

    Repository methods never await between reading and writing this state,
    so each call is atomic under asyncio.
    """

    users: dict[UserId, User] = field(default_factory=dict)
    requests: dict[RequestId, Request] = field(default_factory=dict)
    votes: list[Vote] = field(default_factory=list)
    activities: list[Activity] = field(default_factory=list)

    # Number of successful Transaction.commit calls
    commits: int = 0
