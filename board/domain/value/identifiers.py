"""Strongly typed identifiers for feature board entities.

User IDs are opaque strings assigned by the identity provider; every other
identifier is generated here as a UUID.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", str)
RequestId = NewType("RequestId", UUID)
VoteId = NewType("VoteId", UUID)
ActivityId = NewType("ActivityId", UUID)
