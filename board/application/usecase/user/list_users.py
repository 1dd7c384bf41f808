"""List users use case."""

from board.application.usecase.user.record import UserRecord
from board.domain.service import UserService


class ListUsersUseCase:
    """Use case for listing every user record."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self) -> list[UserRecord]:
        """Execute list users flow."""
        users = await self.user_service.list_users()
        return [UserRecord.from_user(user) for user in users]
