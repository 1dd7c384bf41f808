"""Feature request routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, BackgroundTasks, Cookie, Header, Query, Request
from pydantic import BaseModel

from board.application.notifier import ActivityNotifier
from board.application.usecase.request import (
    AddRequestRequest,
    AddRequestResponse,
    AddRequestUseCase,
    ListRequestsRequest,
    ListRequestsResponse,
    ListRequestsUseCase,
)
from board.application.usecase.vote import UpvoteRequest, UpvoteResponse, UpvoteUseCase
from board.domain.service import JWTService
from board.domain.value import CollectionName
from board.interface.api.auth import resolve_caller

router = APIRouter(prefix="/requests", tags=["requests"], route_class=DishkaRoute)


class AddRequestAPIRequest(BaseModel):
    """API request for adding a feature request.

    Length is checked by the domain so the limit stays configurable.
    """

    text: str


@router.post("", response_model=AddRequestResponse)
async def add_request(
    body: AddRequestAPIRequest,
    request: Request,
    background_tasks: BackgroundTasks,
    add_request_use_case: FromDishka[AddRequestUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> AddRequestResponse:
    """Add a feature request.

    Requires authentication. Logs a "requests" activity after responding.
    """
    caller = resolve_caller(jwt_service, authorization, auth_token)
    result = await add_request_use_case.execute(
        AddRequestRequest(caller=caller, text=body.text)
    )

    notifier = ActivityNotifier(request.app.state.dishka_container)
    background_tasks.add_task(
        notifier.record_created, CollectionName.REQUESTS, result.id
    )
    return result


@router.get("", response_model=ListRequestsResponse)
async def list_requests(
    list_requests_use_case: FromDishka[ListRequestsUseCase],
    limit: int = Query(default=100, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
) -> ListRequestsResponse:
    """List feature requests, most upvoted first."""
    return await list_requests_use_case.execute(
        ListRequestsRequest(limit=limit, offset=offset)
    )


@router.post("/{request_id}/upvote", response_model=UpvoteResponse)
async def upvote(
    request_id: str,
    upvote_use_case: FromDishka[UpvoteUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> UpvoteResponse:
    """Upvote a feature request.

    Requires authentication. A second upvote by the same user is rejected
    with ``failed-precondition``.
    """
    caller = resolve_caller(jwt_service, authorization, auth_token)
    return await upvote_use_case.execute(
        UpvoteRequest(caller=caller, request_id=request_id)
    )
