"""JWT token domain service."""

import logfire

from circle.config import AuthSettings
from circle.domain.error import InvalidTokenError, MissingTokenError
from circle.domain.model import User
from circle.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for bearer token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user: User) -> str:
        """Issue a token bound to the user's id.

        Args:
            user: User to issue the token for

        Returns:
            JWT token string
        """
        with logfire.span(
            "jwt_service.create_token",
            user_id=str(user.id),
            username=user.username.root,
        ):
            token = create_token(str(user.id), user.username.root, self.auth_settings)
            logfire.info("JWT token created", user_id=str(user.id))
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            InvalidTokenError: If token is malformed, badly signed or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise InvalidTokenError(str(e)) from e
            logfire.info("JWT token verified", user_id=payload.user_id)
            return payload

    @staticmethod
    def extract_bearer(authorization: str | None) -> str:
        """Pull the token out of an Authorization header value.

        Accepts ``Bearer <token>`` or a bare token.

        Args:
            authorization: Raw header value

        Returns:
            The token

        Raises:
            MissingTokenError: If the header is absent or carries no token
        """
        if not authorization or not authorization.strip():
            raise MissingTokenError()

        scheme, _, credentials = authorization.strip().partition(" ")
        if scheme.lower() == "bearer":
            token = credentials.strip()
        else:
            token = authorization.strip()

        if not token:
            raise MissingTokenError()
        return token
