"""Authenticate (sign in) use case."""

from pydantic import BaseModel, Field

from circle.application.usecase.base import BaseUseCase
from circle.domain.service import AuthService


class AuthenticateRequest(BaseModel):
    """Email/password sign in request."""

    email: str
    password: str


class AuthenticateResponse(BaseModel):
    """Sign in response."""

    message: str
    auth_token: str = Field(serialization_alias="authToken")


class AuthenticateUseCase(BaseUseCase):
    """Use case for email/password sign in."""

    def __init__(self, auth_service: AuthService) -> None:
        """Initialize authenticate use case.

        Args:
            auth_service: Authentication domain service
        """
        self.auth_service = auth_service

    async def execute(self, request: AuthenticateRequest) -> AuthenticateResponse:
        """Check credentials and issue a token.

        Raises:
            InvalidCredentialsError: Unknown email or wrong password
        """
        _, token = await self.auth_service.authenticate(
            request.email, request.password
        )
        return AuthenticateResponse(
            message="Authentication successful", auth_token=token
        )
