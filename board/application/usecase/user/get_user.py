"""Get user use case."""

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.application.usecase.user.record import UserRecord
from board.domain.service import UserService
from board.domain.value import UserId


class GetUserRequest(BaseModel):
    """Get user request."""

    user_id: str


class GetUserUseCase(BaseUseCase[GetUserRequest, UserRecord]):
    """Use case for fetching a single user record."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetUserRequest) -> UserRecord:
        """Execute get user flow.

        Raises:
            NotFoundError: If user not found
        """
        user = await self.user_service.get_by_id(UserId(request.user_id))
        return UserRecord.from_user(user)
