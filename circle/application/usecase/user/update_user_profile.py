"""Update user profile use case."""

from pydantic import BaseModel, Field

from circle.application.usecase.base import BaseUseCase
from circle.domain.service import ProfileGuard, UserService
from circle.domain.value import Username


class UpdateUserProfileRequest(BaseModel):
    """Update user profile request."""

    username: Username
    authorization: str | None = None
    nickname: str | None = Field(default=None, max_length=255)
    email: str | None = None
    password: str | None = Field(default=None, min_length=1)


class UpdateUserProfileUseCase(BaseUseCase):
    """Use case for updating a user's profile.

    Users can update their nickname, email and password.
    Username cannot be changed through this endpoint.
    """

    def __init__(self, profile_guard: ProfileGuard, user_service: UserService) -> None:
        """Initialize update user profile use case.

        Args:
            profile_guard: Profile access guard
            user_service: User domain service
        """
        self.profile_guard = profile_guard
        self.user_service = user_service

    async def execute(self, request: UpdateUserProfileRequest) -> str:
        """Execute update user profile flow.

        Steps:
        1. Guard: token, target, ownership
        2. Apply the changed fields
        3. Return the confirmation message

        Raises:
            MissingTokenError: No token supplied
            InvalidTokenError: Token invalid
            UserNotFoundError: Unknown username
            NotAuthorizedError: Actor does not own the profile
            InvalidEmailError: New email malformed
            DuplicateEmailError: New email taken
            PersistenceError: No rows updated
        """
        access = await self.profile_guard.check(
            request.username, request.authorization, require_owner=True
        )
        await self.user_service.update_profile(
            access.target,
            nickname=request.nickname,
            email=request.email,
            password=request.password,
        )
        access.applied()
        return "The profile has been updated."
