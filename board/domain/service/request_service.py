"""Request domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from board.config import RequestSettings
from board.domain.error import NotFoundError, ValidationError
from board.domain.model import Request
from board.domain.repository import RequestRepository
from board.domain.value import RequestId

from .base import Service


class RequestService(Service):
    """Domain service for feature request operations."""

    def __init__(
        self,
        request_repository: RequestRepository,
        request_settings: RequestSettings,
    ) -> None:
        """Initialize request service.

        Args:
            request_repository: Request repository
            request_settings: Request configuration (text length limit)
        """
        self.request_repository = request_repository
        self.request_settings = request_settings

    def validate_text(self, text: str) -> None:
        """Validate request text length.

        Length is counted in Unicode code points, not bytes.

        Raises:
            ValidationError: If the text is too long
        """
        limit = self.request_settings.max_text_length
        if len(text) > limit:
            raise ValidationError(
                f"request must be no more than {limit} characters long"
            )

    async def create_request(self, text: str) -> Request:
        """Create a new request with zero upvotes.

        Args:
            text: Request text

        Returns:
            Created request

        Raises:
            ValidationError: If the text is too long
        """
        with logfire.span("request_service.create_request", length=len(text)):
            self.validate_text(text)
            request = Request(
                id=RequestId(uuid4()),
                text=text,
                upvotes=0,
                created_at=datetime.now(),
            )
            saved = await self.request_repository.save(request)
            logfire.info("Request created", request_id=str(saved.id))
            return saved

    async def get_by_id(self, request_id: RequestId) -> Request:
        """Get request by ID.

        Raises:
            NotFoundError: If request not found
        """
        request = await self.request_repository.find_by_id(request_id)
        if not request:
            logfire.warn("Request not found", request_id=str(request_id))
            raise NotFoundError("Request", str(request_id))
        return request

    async def list_requests(self, limit: int = 100, offset: int = 0) -> list[Request]:
        """List requests, most upvoted first."""
        return await self.request_repository.find_all(limit=limit, offset=offset)

    async def increment_upvotes(self, request_id: RequestId) -> None:
        """Atomically increment a request's upvote counter.

        Args:
            request_id: Request ID
        """
        with logfire.span(
            "request_service.increment_upvotes", request_id=str(request_id)
        ):
            await self.request_repository.increment_upvotes(request_id)
