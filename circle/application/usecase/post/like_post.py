"""Like post use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from circle.application.usecase.base import BaseUseCase
from circle.domain.service import PostService, ProfileGuard
from circle.domain.value import PostId


class LikePostRequest(BaseModel):
    """Like post request."""

    post_id: UUID
    authorization: str | None = None


class LikePostResponse(BaseModel):
    """Like post response."""

    like_id: str
    post_id: str
    user_id: str
    created_at: datetime


class LikePostUseCase(BaseUseCase):
    """Use case for liking a post once."""

    def __init__(self, profile_guard: ProfileGuard, post_service: PostService) -> None:
        self.profile_guard = profile_guard
        self.post_service = post_service

    async def execute(self, request: LikePostRequest) -> LikePostResponse:
        """Like a post as the token's user.

        Raises:
            MissingTokenError: No token supplied
            InvalidTokenError: Token invalid
            NotFoundError: Post does not exist
            ConflictError: Post already liked by this user
        """
        user_id = await self.profile_guard.authenticate(request.authorization)
        like = await self.post_service.like_post(PostId(request.post_id), user_id)
        return LikePostResponse(
            like_id=str(like.id),
            post_id=str(like.post_id),
            user_id=str(like.user_id),
            created_at=like.created_at,
        )
