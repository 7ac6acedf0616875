"""Create user (sign up) use case."""

from pydantic import BaseModel, Field

from circle.application.usecase.base import BaseUseCase
from circle.domain.service import JWTService, UserService
from circle.domain.value import Username


class CreateUserRequest(BaseModel):
    """Create user request."""

    username: Username
    email: str
    password: str = Field(min_length=1)
    nickname: str | None = Field(default=None, max_length=255)


class CreateUserResponse(BaseModel):
    """Create user response."""

    message: str
    auth_token: str = Field(serialization_alias="authToken")


class CreateUserUseCase(BaseUseCase):
    """Use case for registering a user and signing them in."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize create user use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: CreateUserRequest) -> CreateUserResponse:
        """Execute sign up flow.

        Steps:
        1. Create the user (email validation, uniqueness, password hashing)
        2. Issue a token for the new user

        Raises:
            InvalidEmailError: If the email is malformed
            DuplicateUsernameError: If the username is taken
            DuplicateEmailError: If the email is taken
        """
        user = await self.user_service.create_user(
            username=request.username,
            email=request.email,
            password=request.password,
            nickname=request.nickname,
        )
        token = self.jwt_service.create_token(user)

        return CreateUserResponse(
            message="User successfully created", auth_token=token
        )
