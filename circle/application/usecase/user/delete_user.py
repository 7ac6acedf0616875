"""Delete user use case."""

from pydantic import BaseModel

from circle.application.usecase.base import BaseUseCase
from circle.domain.service import ProfileGuard, UserService
from circle.domain.value import Username


class DeleteUserRequest(BaseModel):
    """Delete user request."""

    username: Username
    authorization: str | None = None


class DeleteUserUseCase(BaseUseCase):
    """Use case for hard-deleting a user."""

    def __init__(self, profile_guard: ProfileGuard, user_service: UserService) -> None:
        self.profile_guard = profile_guard
        self.user_service = user_service

    async def execute(self, request: DeleteUserRequest) -> str:
        """Execute delete flow.

        Raises:
            MissingTokenError: No token supplied
            InvalidTokenError: Token invalid
            UserNotFoundError: Unknown username (nothing removed)
            NotAuthorizedError: Actor does not own the profile
            PersistenceError: No rows removed
        """
        access = await self.profile_guard.check(
            request.username, request.authorization, require_owner=True
        )
        await self.user_service.delete_user(access.target)
        access.applied()
        return "The user has been deleted."
