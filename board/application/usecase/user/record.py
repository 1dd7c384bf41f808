"""User record representation shared by the user CRUD use cases."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from board.domain.model import User

# Keys the CRUD surface may not write; upvoted_on is owned by the vote flow
RESERVED_FIELDS = frozenset({"id", "upvotedOn", "upvoted_on"})


class UserRecord(BaseModel):
    """User as exposed over HTTP: ``{id, email, upvotedOn, ...attributes}``."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str
    email: str | None = None
    upvoted_on: list[str] = Field(default_factory=list, alias="upvotedOn")

    @classmethod
    def from_user(cls, user: User) -> "UserRecord":
        """Build a record from a User, flattening its attributes."""
        return cls(
            id=user.id,
            email=user.email,
            upvotedOn=[str(rid) for rid in user.upvoted_on],
            **user.attributes,
        )


def writable_fields(body: dict[str, Any]) -> dict[str, Any]:
    """Drop reserved keys from a client-supplied body."""
    return {k: v for k, v in body.items() if k not in RESERVED_FIELDS}
