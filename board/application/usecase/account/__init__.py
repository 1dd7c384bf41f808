"""Account lifecycle use cases."""

from .identity_created import (
    IdentityCreatedRequest,
    IdentityCreatedResponse,
    IdentityCreatedUseCase,
)
from .identity_deleted import (
    IdentityDeletedRequest,
    IdentityDeletedResponse,
    IdentityDeletedUseCase,
)

__all__ = [
    "IdentityCreatedRequest",
    "IdentityCreatedResponse",
    "IdentityCreatedUseCase",
    "IdentityDeletedRequest",
    "IdentityDeletedResponse",
    "IdentityDeletedUseCase",
]
