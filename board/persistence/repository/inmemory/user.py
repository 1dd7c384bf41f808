"""In-memory user repository for testing."""

from datetime import datetime
from typing import Any, Optional

from board.domain.model.user import User
from board.domain.repository.user import UserRepository
from board.domain.value import RequestId, UserId

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._store.users.get(user_id)

    async def find_all(self) -> list[User]:
        """Find all users."""
        return list(self._store.users.values())

    async def save(self, user: User) -> User:
        """Save or update a user, keeping the stored upvoted set."""
        existing = self._store.users.get(user.id)
        if existing:
            user = user.model_copy(
                update={"upvoted_on": existing.upvoted_on, "updated_at": datetime.now()}
            )
        self._store.users[user.id] = user
        return user

    async def merge_attributes(
        self,
        user_id: UserId,
        attributes: dict[str, Any],
        email: str | None = None,
        set_email: bool = False,
    ) -> Optional[User]:
        """Merge attributes into the stored user without awaiting in between."""
        user = self._store.users.get(user_id)
        if user is None:
            return None
        update: dict[str, Any] = {
            "attributes": {**user.attributes, **attributes},
            "updated_at": datetime.now(),
        }
        if set_email:
            update["email"] = email
        merged = user.model_copy(update=update)
        self._store.users[user_id] = merged
        return merged

    async def create_if_absent(self, user: User) -> bool:
        """Insert a user unless the ID already exists."""
        if user.id in self._store.users:
            return False
        self._store.users[user.id] = user
        return True

    async def add_upvoted_on(self, user_id: UserId, request_id: RequestId) -> bool:
        """Append a request ID unless already present."""
        user = self._store.users.get(user_id)
        if not user or request_id in user.upvoted_on:
            return False
        self._store.users[user_id] = user.model_copy(
            update={"upvoted_on": [*user.upvoted_on, request_id]}
        )
        return True

    async def delete(self, user_id: UserId) -> bool:
        """Delete a user."""
        return self._store.users.pop(user_id, None) is not None
