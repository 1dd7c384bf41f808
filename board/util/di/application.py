"""Application layer DI providers."""

from dishka import Scope, provide

from board.application.usecase.account import (
    IdentityCreatedUseCase,
    IdentityDeletedUseCase,
)
from board.application.usecase.activity import LogActivityUseCase
from board.application.usecase.request import AddRequestUseCase, ListRequestsUseCase
from board.application.usecase.user import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
)
from board.application.usecase.vote import UpvoteUseCase
from board.domain.repository import Transaction
from board.domain.service import (
    ActivityService,
    RequestService,
    UserService,
    VoteService,
)
from board.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Request use cases
    @provide(scope=Scope.REQUEST)
    def get_add_request_use_case(
        self, request_service: RequestService, transaction: Transaction
    ) -> AddRequestUseCase:
        """Provide add request use case."""
        return AddRequestUseCase(
            request_service=request_service, transaction=transaction
        )

    @provide(scope=Scope.REQUEST)
    def get_list_requests_use_case(
        self, request_service: RequestService
    ) -> ListRequestsUseCase:
        """Provide list requests use case."""
        return ListRequestsUseCase(request_service=request_service)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_upvote_use_case(
        self, vote_service: VoteService, transaction: Transaction
    ) -> UpvoteUseCase:
        """Provide upvote use case."""
        return UpvoteUseCase(vote_service=vote_service, transaction=transaction)

    # Account lifecycle use cases
    @provide(scope=Scope.REQUEST)
    def get_identity_created_use_case(
        self, user_service: UserService, transaction: Transaction
    ) -> IdentityCreatedUseCase:
        """Provide identity created use case."""
        return IdentityCreatedUseCase(
            user_service=user_service, transaction=transaction
        )

    @provide(scope=Scope.REQUEST)
    def get_identity_deleted_use_case(
        self, user_service: UserService, transaction: Transaction
    ) -> IdentityDeletedUseCase:
        """Provide identity deleted use case."""
        return IdentityDeletedUseCase(
            user_service=user_service, transaction=transaction
        )

    # Activity use cases
    @provide(scope=Scope.REQUEST)
    def get_log_activity_use_case(
        self, activity_service: ActivityService, transaction: Transaction
    ) -> LogActivityUseCase:
        """Provide log activity use case."""
        return LogActivityUseCase(
            activity_service=activity_service, transaction=transaction
        )

    # User CRUD use cases
    @provide(scope=Scope.REQUEST)
    def get_list_users_use_case(self, user_service: UserService) -> ListUsersUseCase:
        """Provide list users use case."""
        return ListUsersUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_get_user_use_case(self, user_service: UserService) -> GetUserUseCase:
        """Provide get user use case."""
        return GetUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_create_user_use_case(
        self, user_service: UserService, transaction: Transaction
    ) -> CreateUserUseCase:
        """Provide create user use case."""
        return CreateUserUseCase(user_service=user_service, transaction=transaction)

    @provide(scope=Scope.REQUEST)
    def get_update_user_use_case(
        self, user_service: UserService, transaction: Transaction
    ) -> UpdateUserUseCase:
        """Provide update user use case."""
        return UpdateUserUseCase(user_service=user_service, transaction=transaction)

    @provide(scope=Scope.REQUEST)
    def get_delete_user_use_case(
        self, user_service: UserService, transaction: Transaction
    ) -> DeleteUserUseCase:
        """Provide delete user use case."""
        return DeleteUserUseCase(user_service=user_service, transaction=transaction)
