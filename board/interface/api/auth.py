"""Caller identity resolution for API routes."""

from board.domain.service import JWTService
from board.domain.value import CallerIdentity

BEARER_PREFIX = "bearer "


def extract_token(authorization: str | None, auth_token: str | None) -> str | None:
    """Pick the token from the Authorization header, falling back to the cookie.

    Args:
        authorization: Raw ``Authorization`` header value
        auth_token: ``auth_token`` cookie value

    Returns:
        Token string, or None if neither source carries one
    """
    if authorization and authorization.lower().startswith(BEARER_PREFIX):
        token = authorization[len(BEARER_PREFIX) :].strip()
        if token:
            return token
    return auth_token or None


def resolve_caller(
    jwt_service: JWTService, authorization: str | None, auth_token: str | None
) -> CallerIdentity | None:
    """Resolve the caller identity attached to an HTTP call."""
    return jwt_service.get_caller_identity(extract_token(authorization, auth_token))
