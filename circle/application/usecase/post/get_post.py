"""Get post use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from circle.application.usecase.base import BaseUseCase
from circle.domain.model import Post
from circle.domain.service import PostService
from circle.domain.value import PostId


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: UUID


class PostResponse(BaseModel):
    """Post response."""

    post_id: str
    author_id: str
    content: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_post(cls, post: Post) -> "PostResponse":
        return cls(
            post_id=str(post.id),
            author_id=str(post.author_id),
            content=post.content,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )


class GetPostUseCase(BaseUseCase):
    """Use case for reading a single post."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> PostResponse:
        """Fetch a post.

        Raises:
            NotFoundError: If the post does not exist
        """
        post = await self.post_service.get_post(PostId(request.post_id))
        return PostResponse.from_post(post)
