"""Domain services."""

from .activity_service import ACTIVITY_MESSAGES, ActivityService
from .base import Service
from .jwt_service import JWTService
from .request_service import RequestService
from .user_service import UserService
from .vote_service import VoteService

__all__ = [
    "ACTIVITY_MESSAGES",
    "ActivityService",
    "JWTService",
    "RequestService",
    "Service",
    "UserService",
    "VoteService",
]
