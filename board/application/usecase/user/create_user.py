"""Create user use case."""

from typing import Any

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.application.usecase.user.record import writable_fields
from board.domain.repository import Transaction
from board.domain.service import UserService


class CreateUserRequest(BaseModel):
    """Create user request with an arbitrary JSON body."""

    fields: dict[str, Any]


class CreateUserResponse(BaseModel):
    """Create user response."""

    id: str


class CreateUserUseCase(BaseUseCase[CreateUserRequest, CreateUserResponse]):
    """Use case for creating a user record verbatim from a request body.

    No schema validation is applied; only reserved keys are dropped.
    """

    def __init__(self, user_service: UserService, transaction: Transaction) -> None:
        self.user_service = user_service
        self.transaction = transaction

    async def execute(self, request: CreateUserRequest) -> CreateUserResponse:
        """Execute create user flow."""
        user = await self.user_service.create_user(writable_fields(request.fields))
        await self.transaction.commit()
        return CreateUserResponse(id=user.id)
