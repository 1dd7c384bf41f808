"""Delete user use case."""

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.repository import Transaction
from board.domain.service import UserService
from board.domain.value import UserId


class DeleteUserRequest(BaseModel):
    """Delete user request."""

    user_id: str


class DeleteUserResponse(BaseModel):
    """Delete user response."""

    deleted: bool


class DeleteUserUseCase(BaseUseCase[DeleteUserRequest, DeleteUserResponse]):
    """Use case for deleting a user record. Deleting an absent user succeeds."""

    def __init__(self, user_service: UserService, transaction: Transaction) -> None:
        self.user_service = user_service
        self.transaction = transaction

    async def execute(self, request: DeleteUserRequest) -> DeleteUserResponse:
        """Execute delete user flow."""
        deleted = await self.user_service.delete_user(UserId(request.user_id))
        await self.transaction.commit()
        return DeleteUserResponse(deleted=deleted)
