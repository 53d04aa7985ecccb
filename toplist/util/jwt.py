"""JWT token utilities.

Access tokens follow the identity provider's format: the user ID is the
``sub`` claim and ``aud`` is the authenticated-role audience.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from toplist.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload."""

    sub: str
    email: str | None = None
    role: str = "authenticated"
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    user_id: str,
    settings: AuthSettings,
    email: str | None = None,
    expires_in: timedelta | None = None,
) -> str:
    """Create a JWT access token for the user.

    Args:
        user_id: User ID (stored as ``sub``)
        settings: Authentication settings
        email: Optional email claim
        expires_in: Token lifetime, defaults to ``jwt_expiry_hours``

    Returns:
        Encoded JWT token
    """
    if expires_in is None:
        expires_in = timedelta(hours=settings.jwt_expiry_hours)

    payload = {
        "sub": user_id,
        "aud": settings.jwt_audience,
        "role": "authenticated",
        "exp": datetime.now(timezone.utc) + expires_in,
    }
    if email is not None:
        payload["email"] = email

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            options={"require": ["sub", "exp"]},
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
