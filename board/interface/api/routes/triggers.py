"""Trigger routes invoked by the hosting platform.

The identity provider calls the identity hooks when an account is created
or deleted. The data store calls ``record-created`` when a document is
inserted into an observed collection.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, BackgroundTasks, Request
from pydantic import BaseModel

from board.application.notifier import ActivityNotifier
from board.application.usecase.account import (
    IdentityCreatedRequest,
    IdentityCreatedUseCase,
    IdentityDeletedRequest,
    IdentityDeletedUseCase,
)
from board.domain.value import CollectionName

router = APIRouter(prefix="/triggers", tags=["triggers"], route_class=DishkaRoute)


class IdentityCreatedEvent(BaseModel):
    """Identity creation event."""

    uid: str
    email: str | None = None


class IdentityCreatedResult(BaseModel):
    created: bool


class IdentityDeletedEvent(BaseModel):
    """Identity deletion event."""

    uid: str


class IdentityDeletedResult(BaseModel):
    deleted: bool


class RecordCreatedEvent(BaseModel):
    """Record creation event."""

    collection: str
    id: str


class RecordCreatedResult(BaseModel):
    logged: bool


@router.post("/identity-created", response_model=IdentityCreatedResult)
async def identity_created(
    event: IdentityCreatedEvent,
    request: Request,
    background_tasks: BackgroundTasks,
    identity_created_use_case: FromDishka[IdentityCreatedUseCase],
) -> IdentityCreatedResult:
    """Create the user record for a new identity.

    Retried deliveries find the record already present and leave it as is.
    """
    result = await identity_created_use_case.execute(
        IdentityCreatedRequest(uid=event.uid, email=event.email)
    )

    if result.created:
        notifier = ActivityNotifier(request.app.state.dishka_container)
        background_tasks.add_task(
            notifier.record_created, CollectionName.USERS, result.user_id
        )
    return IdentityCreatedResult(created=result.created)


@router.post("/identity-deleted", response_model=IdentityDeletedResult)
async def identity_deleted(
    event: IdentityDeletedEvent,
    identity_deleted_use_case: FromDishka[IdentityDeletedUseCase],
) -> IdentityDeletedResult:
    """Delete the user record of a removed identity."""
    result = await identity_deleted_use_case.execute(
        IdentityDeletedRequest(uid=event.uid)
    )
    return IdentityDeletedResult(deleted=result.deleted)


@router.post("/record-created", response_model=RecordCreatedResult)
async def record_created(
    event: RecordCreatedEvent, request: Request
) -> RecordCreatedResult:
    """Log an activity for a record inserted outside this API.

    Never fails: notifier errors are logged and reported as ``logged: false``.
    """
    notifier = ActivityNotifier(request.app.state.dishka_container)
    logged = await notifier.record_created(event.collection, event.id)
    return RecordCreatedResult(logged=logged)
