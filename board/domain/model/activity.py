"""Activity entity."""

from datetime import datetime

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.value import ActivityId


class Activity(DomainModel):
    """Append-only, human-readable log entry describing a creation event."""

    id: ActivityId
    text: str
    created_at: datetime = Field(default_factory=datetime.now)
