"""Identity token handling.

The identity provider signs tokens with a shared secret. This service only
needs to read them; ``create_token`` exists for local tooling and tests.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ValidationError

from board.config import AuthSettings

REQUIRED_CLAIMS = ["uid", "exp"]


class TokenPayload(BaseModel):
    """Claims carried by an identity token."""

    uid: str
    email: str | None = None
    exp: datetime


class JWTError(Exception):
    """Token is missing a claim, forged, malformed or expired."""


def create_token(uid: str, email: str | None, settings: AuthSettings) -> str:
    """Sign a token in the identity provider's format.

    Args:
        uid: Identity provider user ID
        email: Identity email
        settings: Authentication settings

    Returns:
        Encoded token
    """
    claims = {
        "uid": uid,
        "email": email,
        "exp": datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check a token's signature and expiry and return its claims.

    Raises:
        JWTError: If the token cannot be trusted
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.MissingRequiredClaimError as e:
        raise JWTError(f"Token is missing claim: {e.claim}") from e
    except jwt.InvalidTokenError as e:
        raise JWTError("Invalid token") from e

    try:
        return TokenPayload.model_validate(claims)
    except ValidationError as e:
        raise JWTError("Token claims are malformed") from e
