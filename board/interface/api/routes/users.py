"""User record routes.

Plain CRUD over the users collection. Bodies are stored as given apart
from the reserved keys ``id`` and ``upvotedOn``.
"""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, BackgroundTasks, Body, Request, status

from board.application.notifier import ActivityNotifier
from board.application.usecase.user import (
    CreateUserRequest,
    CreateUserResponse,
    CreateUserUseCase,
    DeleteUserRequest,
    DeleteUserResponse,
    DeleteUserUseCase,
    GetUserRequest,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserRequest,
    UpdateUserUseCase,
    UserRecord,
)
from board.domain.value import CollectionName

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.get("", response_model=list[UserRecord])
async def list_users(
    list_users_use_case: FromDishka[ListUsersUseCase],
) -> list[UserRecord]:
    """List all user records."""
    return await list_users_use_case.execute()


@router.get("/{user_id}", response_model=UserRecord)
async def get_user(
    user_id: str,
    get_user_use_case: FromDishka[GetUserUseCase],
) -> UserRecord:
    """Get a user record by ID.

    Raises NotFoundError (404) if the user does not exist.
    """
    return await get_user_use_case.execute(GetUserRequest(user_id=user_id))


@router.post(
    "", response_model=CreateUserResponse, status_code=status.HTTP_201_CREATED
)
async def create_user(
    request: Request,
    background_tasks: BackgroundTasks,
    create_user_use_case: FromDishka[CreateUserUseCase],
    body: dict[str, Any] = Body(...),
) -> CreateUserResponse:
    """Create a user record from the request body."""
    result = await create_user_use_case.execute(CreateUserRequest(fields=body))

    notifier = ActivityNotifier(request.app.state.dishka_container)
    background_tasks.add_task(notifier.record_created, CollectionName.USERS, result.id)
    return result


@router.put("/{user_id}", response_model=UserRecord)
async def update_user(
    user_id: str,
    update_user_use_case: FromDishka[UpdateUserUseCase],
    body: dict[str, Any] = Body(...),
) -> UserRecord:
    """Merge the request body into an existing user record."""
    return await update_user_use_case.execute(
        UpdateUserRequest(user_id=user_id, fields=body)
    )


@router.delete("/{user_id}", response_model=DeleteUserResponse)
async def delete_user(
    user_id: str,
    delete_user_use_case: FromDishka[DeleteUserUseCase],
) -> DeleteUserResponse:
    """Delete a user record. Deleting a missing user is not an error."""
    return await delete_user_use_case.execute(DeleteUserRequest(user_id=user_id))
