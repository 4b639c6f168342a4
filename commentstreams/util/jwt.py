"""JWT token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from commentstreams.config import AuthSettings

CSRF_PURPOSE = "csrf"


class CsrfTokenPayload(BaseModel):
    """CSRF token payload."""

    sub: str
    purpose: str
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(actor_id: int, settings: AuthSettings) -> str:
    """Create a CSRF token bound to an actor.

    Args:
        actor_id: Actor the token is issued to
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(
        minutes=settings.csrf_token_expiry_minutes
    )

    payload = {
        "sub": str(actor_id),
        "purpose": CSRF_PURPOSE,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.csrf_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> CsrfTokenPayload:
    """Verify and decode a CSRF token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid, expired, or not a CSRF token
    """
    try:
        payload = jwt.decode(
            token, settings.csrf_secret, algorithms=[settings.jwt_algorithm]
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

    if payload.get("purpose") != CSRF_PURPOSE:
        raise JWTError("Not a CSRF token")
    return CsrfTokenPayload(**payload)
