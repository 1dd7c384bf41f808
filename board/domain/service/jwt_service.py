"""Caller identity service."""

import logfire

from board.config import AuthSettings
from board.domain.value import CallerIdentity, UserId
from board.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Turns identity tokens into caller identities.

    Callers never see token errors: an unusable token is treated exactly
    like a missing one, and the use case decides whether that is allowed.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(self, uid: str, email: str | None = None) -> str:
        """Sign a token for an identity.

        Production tokens come from the identity provider; this exists for
        local tooling and tests only.
        """
        return create_token(uid, email, self.auth_settings)

    def verify_token(self, token: str) -> TokenPayload:
        """Return the claims of a trusted token.

        Raises:
            JWTError: If the token is forged, malformed or expired
        """
        with logfire.span("jwt_service.verify_token"):
            return verify_token(token, self.auth_settings)

    def get_caller_identity(self, token: str | None) -> CallerIdentity | None:
        """Resolve a token to the caller it identifies.

        Args:
            token: Raw token, if the call carried one

        Returns:
            Caller identity, or None for a missing or unusable token
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
        except JWTError as e:
            logfire.info("Caller token rejected", reason=str(e))
            return None

        return CallerIdentity(uid=UserId(payload.uid), email=payload.email)
