"""Share post use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from circle.application.usecase.base import BaseUseCase
from circle.domain.service import PostService, ProfileGuard
from circle.domain.value import PostId


class SharePostRequest(BaseModel):
    """Share post request."""

    post_id: UUID
    authorization: str | None = None


class SharePostResponse(BaseModel):
    """Share post response.

    ``share_id`` identifies the share itself; ``post_id`` the shared post.
    """

    share_id: str
    post_id: str
    user_id: str
    created_at: datetime


class SharePostUseCase(BaseUseCase):
    """Use case for sharing a post."""

    def __init__(self, profile_guard: ProfileGuard, post_service: PostService) -> None:
        self.profile_guard = profile_guard
        self.post_service = post_service

    async def execute(self, request: SharePostRequest) -> SharePostResponse:
        """Share a post as the token's user.

        Raises:
            MissingTokenError: No token supplied
            InvalidTokenError: Token invalid
            NotFoundError: Post does not exist
        """
        user_id = await self.profile_guard.authenticate(request.authorization)
        share = await self.post_service.share_post(PostId(request.post_id), user_id)
        return SharePostResponse(
            share_id=str(share.id),
            post_id=str(share.post_id),
            user_id=str(share.user_id),
            created_at=share.created_at,
        )
