"""User use cases."""

from .create_user import CreateUserRequest, CreateUserResponse, CreateUserUseCase
from .delete_user import DeleteUserRequest, DeleteUserResponse, DeleteUserUseCase
from .get_user import GetUserRequest, GetUserUseCase
from .list_users import ListUsersUseCase
from .record import RESERVED_FIELDS, UserRecord
from .update_user import UpdateUserRequest, UpdateUserUseCase

__all__ = [
    "CreateUserRequest",
    "CreateUserResponse",
    "CreateUserUseCase",
    "DeleteUserRequest",
    "DeleteUserResponse",
    "DeleteUserUseCase",
    "GetUserRequest",
    "GetUserUseCase",
    "ListUsersUseCase",
    "RESERVED_FIELDS",
    "UpdateUserRequest",
    "UpdateUserUseCase",
    "UserRecord",
]
