"""Get user use case."""

from datetime import datetime

from pydantic import BaseModel

from circle.application.usecase.base import BaseUseCase
from circle.domain.model import User
from circle.domain.service import ProfileGuard
from circle.domain.value import Username


class GetUserRequest(BaseModel):
    """Get user request."""

    username: Username
    authorization: str | None = None


class UserDTO(BaseModel):
    """Public view of a user.

    Follower and following lists are reduced to counts; the password
    digest is never included.
    """

    id: str
    username: str
    email: str
    nickname: str | None
    profile_pic: str | None
    profile_banner: str | None
    bio: str | None
    followers: int
    following: int
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserDTO":
        return cls(
            id=str(user.id),
            username=user.username.root,
            email=user.email.root,
            nickname=user.nickname,
            profile_pic=user.profile_pic,
            profile_banner=user.profile_banner,
            bio=user.bio,
            followers=len(user.followers),
            following=len(user.following),
            created_at=user.created_at,
        )


class GetUserUseCase(BaseUseCase):
    """Use case for reading a user's profile."""

    def __init__(self, profile_guard: ProfileGuard) -> None:
        """Initialize get user use case.

        Args:
            profile_guard: Profile access guard
        """
        self.profile_guard = profile_guard

    async def execute(self, request: GetUserRequest) -> UserDTO:
        """Execute get user flow.

        Raises:
            MissingTokenError: No token supplied
            InvalidTokenError: Token invalid
            UserNotFoundError: Unknown username
        """
        access = await self.profile_guard.check(
            request.username, request.authorization
        )
        dto = UserDTO.from_user(access.target)
        access.applied()
        return dto
