"""Add request use case."""

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.error import NotAuthenticatedError
from board.domain.repository import Transaction
from board.domain.service import RequestService
from board.domain.value import CallerIdentity


class AddRequestRequest(BaseModel):
    """Add request request."""

    caller: CallerIdentity | None  # None when the call carries no identity
    text: str


class AddRequestResponse(BaseModel):
    """Add request response."""

    id: str


class AddRequestUseCase(BaseUseCase[AddRequestRequest, AddRequestResponse]):
    """Use case for submitting a new feature request."""

    def __init__(
        self, request_service: RequestService, transaction: Transaction
    ) -> None:
        """Initialize add request use case.

        Args:
            request_service: Request domain service
            transaction: Unit of work of the current scope
        """
        self.request_service = request_service
        self.transaction = transaction

    async def execute(self, request: AddRequestRequest) -> AddRequestResponse:
        """Execute add request flow.

        Args:
            request: Caller identity and request text

        Returns:
            ID of the created request

        Raises:
            NotAuthenticatedError: If there is no caller identity
            ValidationError: If the text is too long
        """
        if request.caller is None:
            raise NotAuthenticatedError("add requests")

        created = await self.request_service.create_request(request.text)
        await self.transaction.commit()
        return AddRequestResponse(id=str(created.id))
