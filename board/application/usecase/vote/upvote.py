"""Upvote use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.error import NotAuthenticatedError, NotFoundError
from board.domain.repository import Transaction
from board.domain.service import VoteService
from board.domain.value import CallerIdentity, RequestId


class UpvoteRequest(BaseModel):
    """Upvote request."""

    caller: CallerIdentity | None  # None when the call carries no identity
    request_id: str  # UUID string


class UpvoteResponse(BaseModel):
    """Upvote response."""

    request_id: str
    user_id: str
    created_at: datetime


class UpvoteUseCase(BaseUseCase[UpvoteRequest, UpvoteResponse]):
    """Use case for upvoting a request."""

    def __init__(self, vote_service: VoteService, transaction: Transaction) -> None:
        """Initialize upvote use case.

        Args:
            vote_service: Vote domain service
            transaction: Unit of work of the current scope
        """
        self.vote_service = vote_service
        self.transaction = transaction

    async def execute(self, request: UpvoteRequest) -> UpvoteResponse:
        """Execute upvote flow.

        The ledger row, the voter's set and the counter are committed
        together before the vote is returned.

        Args:
            request: Upvote request

        Returns:
            Upvote response with vote details

        Raises:
            NotAuthenticatedError: If there is no caller identity
            NotFoundError: If the caller's user record or the request is
                missing, including request IDs that are not UUIDs
            AlreadyVotedError: If the caller already voted on the request
        """
        if request.caller is None:
            raise NotAuthenticatedError("vote up requests")

        try:
            request_id = RequestId(UUID(request.request_id))
        except ValueError:
            raise NotFoundError("Request", request.request_id) from None

        vote = await self.vote_service.upvote(request.caller.uid, request_id)
        await self.transaction.commit()

        return UpvoteResponse(
            request_id=str(vote.request_id),
            user_id=vote.user_id,
            created_at=vote.created_at,
        )
