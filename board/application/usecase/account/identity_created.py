"""Identity created hook use case."""

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.repository import Transaction
from board.domain.service import UserService
from board.domain.value import UserId


class IdentityCreatedRequest(BaseModel):
    """Identity created event from the identity provider."""

    uid: str
    email: str | None = None


class IdentityCreatedResponse(BaseModel):
    """Identity created response."""

    user_id: str
    created: bool  # False when the hook was retried for an existing user


class IdentityCreatedUseCase(
    BaseUseCase[IdentityCreatedRequest, IdentityCreatedResponse]
):
    """Use case for creating a user record when an identity signs up."""

    def __init__(self, user_service: UserService, transaction: Transaction) -> None:
        """Initialize identity created use case.

        Args:
            user_service: User domain service
            transaction: Unit of work of the current scope
        """
        self.user_service = user_service
        self.transaction = transaction

    async def execute(self, request: IdentityCreatedRequest) -> IdentityCreatedResponse:
        """Execute identity created flow.

        Creates ``{email, upvoted_on: []}`` keyed by the identity's uid.
        A retried event leaves the existing record untouched.

        Args:
            request: Identity created event

        Returns:
            Whether a user record was created
        """
        created = await self.user_service.ensure_user(
            UserId(request.uid), request.email
        )
        await self.transaction.commit()
        return IdentityCreatedResponse(user_id=request.uid, created=created)
