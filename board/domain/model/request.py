"""Feature request entity."""

from datetime import datetime

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.value import RequestId


class Request(DomainModel):
    """Feature request submitted by a user.

    The text length limit is enforced once, at creation, by RequestService.
    The upvote counter only ever grows, and only through atomic increments.
    """

    id: RequestId
    text: str
    upvotes: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
