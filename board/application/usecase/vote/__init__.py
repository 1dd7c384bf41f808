"""Vote use cases."""

from .upvote import UpvoteRequest, UpvoteResponse, UpvoteUseCase

__all__ = [
    "UpvoteRequest",
    "UpvoteResponse",
    "UpvoteUseCase",
]
