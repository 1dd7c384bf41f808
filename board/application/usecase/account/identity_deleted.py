"""Identity deleted hook use case."""

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.repository import Transaction
from board.domain.service import UserService
from board.domain.value import UserId


class IdentityDeletedRequest(BaseModel):
    """Identity deleted event from the identity provider."""

    uid: str


class IdentityDeletedResponse(BaseModel):
    """Identity deleted response."""

    user_id: str
    deleted: bool


class IdentityDeletedUseCase(
    BaseUseCase[IdentityDeletedRequest, IdentityDeletedResponse]
):
    """Use case for removing the user record of a deleted identity.

    Requests, votes and activities are not rolled back.
    """

    def __init__(self, user_service: UserService, transaction: Transaction) -> None:
        self.user_service = user_service
        self.transaction = transaction

    async def execute(self, request: IdentityDeletedRequest) -> IdentityDeletedResponse:
        """Execute identity deleted flow."""
        deleted = await self.user_service.delete_user(UserId(request.uid))
        await self.transaction.commit()
        return IdentityDeletedResponse(user_id=request.uid, deleted=deleted)
