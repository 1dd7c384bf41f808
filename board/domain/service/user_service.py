"""User domain service."""

from typing import Any
from uuid import uuid4

import logfire

from board.domain.error import NotFoundError
from board.domain.model import User
from board.domain.repository import UserRepository
from board.domain.value import RequestId, UserId

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=user_id):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=user_id)
                raise NotFoundError("User", user_id)
            return user

    async def list_users(self) -> list[User]:
        """List all users."""
        with logfire.span("user_service.list_users"):
            return await self.user_repository.find_all()

    async def ensure_user(self, user_id: UserId, email: str | None) -> bool:
        """Create a user record for an identity unless one already exists.

        Safe to retry: an existing record keeps its email and upvoted set.

        Args:
            user_id: Identity provider user ID
            email: Identity email

        Returns:
            True if a record was created, False if it already existed
        """
        with logfire.span("user_service.ensure_user", user_id=user_id):
            created = await self.user_repository.create_if_absent(
                User(id=user_id, email=email, upvoted_on=[])
            )
            if created:
                logfire.info("User created", user_id=user_id)
            else:
                logfire.info("User already exists", user_id=user_id)
            return created

    async def create_user(self, fields: dict[str, Any]) -> User:
        """Create a user with a generated ID from free-form fields.

        Args:
            fields: Record fields; ``email`` maps to the email column and
                everything else is kept as attributes

        Returns:
            Created user
        """
        fields = dict(fields)
        email = fields.pop("email", None)
        user = User(
            id=UserId(uuid4().hex),
            email=email,
            upvoted_on=[],
            attributes=fields,
        )
        with logfire.span("user_service.create_user", user_id=user.id):
            saved = await self.user_repository.save(user)
            logfire.info("User created", user_id=user.id)
            return saved

    async def update_user(self, user_id: UserId, fields: dict[str, Any]) -> User:
        """Merge fields into an existing user in one atomic write.

        Args:
            user_id: User ID
            fields: Fields to merge; ``email`` updates the email column

        Returns:
            Updated user

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.update_user", user_id=user_id):
            fields = dict(fields)
            set_email = "email" in fields
            email = fields.pop("email", None)
            updated = await self.user_repository.merge_attributes(
                user_id, fields, email=email, set_email=set_email
            )
            if updated is None:
                logfire.warn("User not found", user_id=user_id)
                raise NotFoundError("User", user_id)
            return updated

    async def delete_user(self, user_id: UserId) -> bool:
        """Delete a user record.

        Requests, votes and activities are left untouched.

        Args:
            user_id: User ID

        Returns:
            True if a record was deleted
        """
        with logfire.span("user_service.delete_user", user_id=user_id):
            deleted = await self.user_repository.delete(user_id)
            if deleted:
                logfire.info("User deleted", user_id=user_id)
            else:
                logfire.info("No user to delete", user_id=user_id)
            return deleted

    async def add_upvoted_on(self, user_id: UserId, request_id: RequestId) -> bool:
        """Atomically record that the user voted on a request.

        Args:
            user_id: User ID
            request_id: Request ID

        Returns:
            True if the request ID was added
        """
        with logfire.span(
            "user_service.add_upvoted_on",
            user_id=user_id,
            request_id=str(request_id),
        ):
            return await self.user_repository.add_upvoted_on(user_id, request_id)
