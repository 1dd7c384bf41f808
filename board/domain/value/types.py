"""Domain value objects for the feature board.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict

from board.domain.value.identifiers import UserId


class CollectionName(str, Enum):
    """Collections whose record creations are observed by the activity log."""

    USERS = "users"
    REQUESTS = "requests"
    ACTIVITIES = "activities"


class CallerIdentity(BaseModel):
    """Authenticated principal attached to a call.

    Passed explicitly into every use case that requires authentication.
    A missing identity is represented by ``None``.
    """

    model_config = ConfigDict(frozen=True)

    uid: UserId
    email: str | None = None
