"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from board.domain.model.user import User
from board.domain.value import RequestId, UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[User]:
        """Find all users.

        Returns:
            List of all users
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Overwrites ``email`` and ``attributes``. ``upvoted_on`` is only
        written on insert; updates go through ``add_upvoted_on``.

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass

    @abstractmethod
    async def merge_attributes(
        self,
        user_id: UserId,
        attributes: dict[str, Any],
        email: str | None = None,
        set_email: bool = False,
    ) -> Optional[User]:
        """Atomically merge attributes into an existing user.

        Keys in ``attributes`` overwrite stored keys of the same name; other
        stored keys are kept, including ones written by a concurrent merge.
        A missing user is never created.

        Args:
            user_id: The user's unique identifier
            attributes: Attributes to merge
            email: New email, applied only when ``set_email`` is True
            set_email: Whether to overwrite the email column

        Returns:
            The updated user, or None if no such user exists
        """
        pass

    @abstractmethod
    async def create_if_absent(self, user: User) -> bool:
        """Insert a user unless one with the same ID already exists.

        Args:
            user: The user to insert

        Returns:
            True if the user was created, False if it already existed
        """
        pass

    @abstractmethod
    async def add_upvoted_on(self, user_id: UserId, request_id: RequestId) -> bool:
        """Atomically add a request ID to the user's upvoted set.

        Args:
            user_id: The user's unique identifier
            request_id: Request to add

        Returns:
            True if the ID was added, False if it was already present
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId) -> bool:
        """Delete a user.

        Args:
            user_id: The user ID to delete

        Returns:
            True if a user was deleted, False if none existed
        """
        pass
