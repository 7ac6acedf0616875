"""Authentication domain service."""

import logfire

from circle.domain.error import InvalidCredentialsError
from circle.domain.model import User
from circle.domain.repository import UserRepository
from circle.domain.value import Email

from .base import Service
from .jwt_service import JWTService
from .password_service import PasswordService


class AuthService(Service):
    """Domain service for email/password authentication.

    Unknown emails and wrong passwords fail identically so callers cannot
    probe which emails are registered.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize auth service.

        Args:
            user_repository: User repository
            password_service: Password hashing service
            jwt_service: Token service
        """
        self.user_repository = user_repository
        self.password_service = password_service
        self.jwt_service = jwt_service

    async def authenticate(self, email: str, password: str) -> tuple[User, str]:
        """Check credentials and issue a token.

        Args:
            email: Email the user registered with
            password: Plaintext password

        Returns:
            The authenticated user and a freshly issued token

        Raises:
            InvalidCredentialsError: If no user matches or the password is wrong
        """
        with logfire.span("auth_service.authenticate"):
            try:
                lookup = Email(email)
            except ValueError:
                # A malformed email cannot belong to any user
                logfire.info("Authentication with malformed email")
                raise InvalidCredentialsError()

            user = await self.user_repository.find_by_email(lookup)
            if not user or not self.password_service.verify(
                user.password_hash, password
            ):
                logfire.warn("Authentication failed")
                raise InvalidCredentialsError()

            token = self.jwt_service.create_token(user)
            logfire.info("User authenticated", user_id=str(user.id))
            return user, token
