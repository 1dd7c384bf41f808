"""Domain layer DI providers."""

from dishka import Scope, provide

from board.config import AuthSettings, RequestSettings
from board.domain.repository import (
    ActivityRepository,
    RequestRepository,
    UserRepository,
    VoteRepository,
)
from board.domain.service import (
    ActivityService,
    JWTService,
    RequestService,
    UserService,
    VoteService,
)
from board.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_request_service(
        self,
        request_repository: RequestRepository,
        request_settings: RequestSettings,
    ) -> RequestService:
        """Provide request domain service."""
        return RequestService(
            request_repository=request_repository,
            request_settings=request_settings,
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        request_service: RequestService,
        user_service: UserService,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            request_service=request_service,
            user_service=user_service,
        )

    @provide
    def get_activity_service(
        self, activity_repository: ActivityRepository
    ) -> ActivityService:
        """Provide activity domain service."""
        return ActivityService(activity_repository=activity_repository)
