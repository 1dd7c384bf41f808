"""List requests use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from board.application.usecase.base import BaseUseCase
from board.domain.service import RequestService


class ListRequestsRequest(BaseModel):
    """List requests request."""

    limit: int = Field(default=100, ge=1, le=500)
    offset: int = Field(default=0, ge=0)


class RequestItem(BaseModel):
    """Single request in a listing."""

    id: str
    text: str
    upvotes: int
    created_at: datetime


class ListRequestsResponse(BaseModel):
    """List requests response."""

    requests: list[RequestItem]


class ListRequestsUseCase(BaseUseCase[ListRequestsRequest, ListRequestsResponse]):
    """Use case for listing requests, most upvoted first."""

    def __init__(self, request_service: RequestService) -> None:
        self.request_service = request_service

    async def execute(self, request: ListRequestsRequest) -> ListRequestsResponse:
        """Execute list requests flow."""
        requests = await self.request_service.list_requests(
            limit=request.limit, offset=request.offset
        )
        return ListRequestsResponse(
            requests=[
                RequestItem(
                    id=str(r.id),
                    text=r.text,
                    upvotes=r.upvotes,
                    created_at=r.created_at,
                )
                for r in requests
            ]
        )
