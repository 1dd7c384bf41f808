"""Activity use cases."""

from .log_activity import LogActivityRequest, LogActivityResponse, LogActivityUseCase

__all__ = [
    "LogActivityRequest",
    "LogActivityResponse",
    "LogActivityUseCase",
]
