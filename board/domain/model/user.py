"""User aggregate root.

Users are this system's view of an identity from the external identity
provider. They track which requests they have already upvoted.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.value import RequestId, UserId


class User(DomainModel):
    """User aggregate root.

    Business rules:
    - ``upvoted_on`` contains a request ID iff the user successfully voted on it
    - ``upvoted_on`` never shrinks and holds no duplicates
    - ``attributes`` carries free-form fields written through the CRUD API
    """

    id: UserId
    email: Optional[str] = None
    upvoted_on: list[RequestId] = Field(default_factory=list)
    attributes: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def has_upvoted(self, request_id: RequestId) -> bool:
        """Check whether the user already voted on a request."""
        return request_id in self.upvoted_on
