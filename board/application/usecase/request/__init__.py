"""Request use cases."""

from .add_request import AddRequestRequest, AddRequestResponse, AddRequestUseCase
from .list_requests import (
    ListRequestsRequest,
    ListRequestsResponse,
    ListRequestsUseCase,
    RequestItem,
)

__all__ = [
    "AddRequestRequest",
    "AddRequestResponse",
    "AddRequestUseCase",
    "ListRequestsRequest",
    "ListRequestsResponse",
    "ListRequestsUseCase",
    "RequestItem",
]
