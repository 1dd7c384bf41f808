"""Vote domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from board.domain.error import AlreadyVotedError
from board.domain.model.vote import Vote
from board.domain.repository import VoteRepository
from board.domain.value import RequestId, UserId, VoteId

from .base import Service
from .request_service import RequestService
from .user_service import UserService


class VoteService(Service):
    """Domain service for vote operations.

    All writes of an upvote share the request scope's transaction; the
    calling use case commits them together, and a failure rolls all of
    them back.
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        request_service: RequestService,
        user_service: UserService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote ledger repository
            request_service: Request domain service
            user_service: User domain service
        """
        self.vote_repository = vote_repository
        self.request_service = request_service
        self.user_service = user_service

    async def upvote(self, user_id: UserId, request_id: RequestId) -> Vote:
        """Upvote a request at most once per user.

        Steps:
        1. Load the user and reject if the request is already in ``upvoted_on``
        2. Insert the ledger row; the unique (user, request) constraint
           rejects a concurrent duplicate that slipped past step 1
        3. Atomically add the request to ``upvoted_on``
        4. Atomically increment the request's upvote counter

        Args:
            user_id: Voting user's ID
            request_id: Request ID

        Returns:
            Created vote

        Raises:
            NotFoundError: If user or request not found
            AlreadyVotedError: If the user already voted on the request
        """
        with logfire.span(
            "vote_service.upvote", user_id=user_id, request_id=str(request_id)
        ):
            user = await self.user_service.get_by_id(user_id)
            if user.has_upvoted(request_id):
                logfire.warn(
                    "Duplicate vote attempt",
                    user_id=user_id,
                    request_id=str(request_id),
                )
                raise AlreadyVotedError(user_id, str(request_id))

            await self.request_service.get_by_id(request_id)

            vote = Vote(
                id=VoteId(uuid4()),
                user_id=user_id,
                request_id=request_id,
                created_at=datetime.now(),
            )

            try:
                saved_vote = await self.vote_repository.save(vote)
            except IntegrityError:
                logfire.warn(
                    "Concurrent duplicate vote rejected",
                    user_id=user_id,
                    request_id=str(request_id),
                )
                raise AlreadyVotedError(user_id, str(request_id))

            await self.user_service.add_upvoted_on(user_id, request_id)
            await self.request_service.increment_upvotes(request_id)

            logfire.info("Request upvoted", user_id=user_id, request_id=str(request_id))
            return saved_vote
