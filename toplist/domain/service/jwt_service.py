"""JWT token domain service."""

from uuid import UUID

import logfire

from toplist.config import AuthSettings
from toplist.domain.value import UserId
from toplist.util.jwt import JWTError, TokenPayload, verify_token

from .base import Service

BEARER_PREFIX = "bearer "


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.debug("JWT token verified", user_id=payload.sub)
                return payload
            except JWTError as e:
                logfire.info("JWT token verification failed", error=str(e))
                raise

    def get_user_id_from_bearer(self, authorization: str | None) -> UserId | None:
        """Resolve the caller's user ID from an Authorization header.

        Never raises: a missing header, a non-bearer scheme, an invalid or
        expired token, or a ``sub`` that is not a UUID all yield None.

        Args:
            authorization: Raw Authorization header value

        Returns:
            User ID if the credential is valid, None otherwise
        """
        if not authorization or not authorization.lower().startswith(BEARER_PREFIX):
            return None

        token = authorization[len(BEARER_PREFIX) :].strip()
        if not token:
            return None

        try:
            payload = self.verify_token(token)
            return UserId(UUID(payload.sub))
        except (JWTError, ValueError) as e:
            logfire.debug(
                "Bearer credential rejected, treating as unauthenticated",
                error=str(e),
            )
            return None
