"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from board.domain.model import Activity, Request, User, Vote
from board.domain.value import ActivityId, RequestId, UserId, VoteId


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(row["id"]),
        email=row.get("email"),
        upvoted_on=[RequestId(_uuid(rid)) for rid in row.get("upvoted_on") or []],
        attributes=dict(row.get("attributes") or {}),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = user.model_dump()
    data["upvoted_on"] = [str(rid) for rid in user.upvoted_on]
    return data


def row_to_request(row: Dict[str, Any]) -> Request:
    """Convert database row to Request domain model."""
    return Request(
        id=RequestId(_uuid(row["id"])),
        text=row["text"],
        upvotes=row["upvotes"],
        created_at=row["created_at"],
    )


def request_to_dict(request: Request) -> Dict[str, Any]:
    """Convert Request domain model to database dict."""
    return request.model_dump()


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(_uuid(row["id"])),
        user_id=UserId(row["user_id"]),
        request_id=RequestId(_uuid(row["request_id"])),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    return vote.model_dump()


def row_to_activity(row: Dict[str, Any]) -> Activity:
    """Convert database row to Activity domain model."""
    return Activity(
        id=ActivityId(_uuid(row["id"])),
        text=row["text"],
        created_at=row["created_at"],
    )


def activity_to_dict(activity: Activity) -> Dict[str, Any]:
    """Convert Activity domain model to database dict."""
    return activity.model_dump()
