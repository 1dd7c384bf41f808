"""Update user use case."""

from typing import Any

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.application.usecase.user.record import UserRecord, writable_fields
from board.domain.repository import Transaction
from board.domain.service import UserService
from board.domain.value import UserId


class UpdateUserRequest(BaseModel):
    """Update user request."""

    user_id: str
    fields: dict[str, Any]


class UpdateUserUseCase(BaseUseCase[UpdateUserRequest, UserRecord]):
    """Use case for merging fields into an existing user record."""

    def __init__(self, user_service: UserService, transaction: Transaction) -> None:
        """Initialize update user use case.

        Args:
            user_service: User domain service
            transaction: Unit of work of the current scope
        """
        self.user_service = user_service
        self.transaction = transaction

    async def execute(self, request: UpdateUserRequest) -> UserRecord:
        """Execute update user flow.

        Steps:
        1. Drop reserved keys from the body
        2. Merge remaining fields into the stored record
        3. Commit, then return the updated record

        Raises:
            NotFoundError: If user not found
        """
        user = await self.user_service.update_user(
            UserId(request.user_id), writable_fields(request.fields)
        )
        await self.transaction.commit()
        return UserRecord.from_user(user)
