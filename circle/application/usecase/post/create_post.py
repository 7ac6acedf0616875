"""Create post use case."""

from pydantic import BaseModel, Field

from circle.application.usecase.base import BaseUseCase
from circle.domain.service import PostService, ProfileGuard

from .get_post import PostResponse


class CreatePostRequest(BaseModel):
    """Create post request."""

    content: str = Field(min_length=1, max_length=10000)
    authorization: str | None = None


class CreatePostUseCase(BaseUseCase):
    """Use case for creating a post as the authenticated user."""

    def __init__(self, profile_guard: ProfileGuard, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            profile_guard: Resolves the author from the bearer token
            post_service: Post domain service
        """
        self.profile_guard = profile_guard
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> PostResponse:
        """Create a post authored by the token's user.

        Raises:
            MissingTokenError: No token supplied
            InvalidTokenError: Token invalid
        """
        author_id = await self.profile_guard.authenticate(request.authorization)
        post = await self.post_service.create_post(author_id, request.content)
        return PostResponse.from_post(post)
