"""Post domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from circle.domain.error import DuplicateLikeError, NotFoundError
from circle.domain.model import LikedPost, Post, SharedPost
from circle.domain.repository import (
    LikedPostRepository,
    PostRepository,
    SharedPostRepository,
)
from circle.domain.value import LikedPostId, PostId, SharedPostId, UserId

from .base import Service


class PostService(Service):
    """Domain service for posts and the likes/shares on them."""

    def __init__(
        self,
        post_repository: PostRepository,
        liked_post_repository: LikedPostRepository,
        shared_post_repository: SharedPostRepository,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            liked_post_repository: Like repository
            shared_post_repository: Share repository
        """
        self.post_repository = post_repository
        self.liked_post_repository = liked_post_repository
        self.shared_post_repository = shared_post_repository

    async def create_post(self, author_id: UserId, content: str) -> Post:
        """Create a new post.

        Args:
            author_id: Author's user ID
            content: Post body

        Returns:
            Created post
        """
        with logfire.span("post_service.create_post", author_id=str(author_id)):
            now = datetime.now()
            post = Post(
                id=PostId(uuid4()),
                author_id=author_id,
                content=content,
                created_at=now,
                updated_at=now,
            )
            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=str(saved.id))
            return saved

    async def get_post(self, post_id: PostId) -> Post:
        """Get post by ID.

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("post_service.get_post", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))
            return post

    async def like_post(self, post_id: PostId, user_id: UserId) -> LikedPost:
        """Like a post.

        Args:
            post_id: Post to like
            user_id: Liking user

        Returns:
            Created like record

        Raises:
            NotFoundError: If the post does not exist
            DuplicateLikeError: If the user already liked the post
        """
        with logfire.span(
            "post_service.like_post", post_id=str(post_id), user_id=str(user_id)
        ):
            await self.get_post(post_id)

            like = LikedPost(
                id=LikedPostId(uuid4()),
                user_id=user_id,
                post_id=post_id,
                created_at=datetime.now(),
            )

            try:
                saved = await self.liked_post_repository.save(like)
            except DuplicateLikeError:
                logfire.warn(
                    "Duplicate like attempt", user_id=str(user_id), post_id=str(post_id)
                )
                raise

            logfire.info("Post liked", post_id=str(post_id), user_id=str(user_id))
            return saved

    async def share_post(self, post_id: PostId, user_id: UserId) -> SharedPost:
        """Share a post. Sharing the same post again records a new share.

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span(
            "post_service.share_post", post_id=str(post_id), user_id=str(user_id)
        ):
            await self.get_post(post_id)

            share = SharedPost(
                id=SharedPostId(uuid4()),
                user_id=user_id,
                post_id=post_id,
                created_at=datetime.now(),
            )
            saved = await self.shared_post_repository.save(share)
            logfire.info("Post shared", post_id=str(post_id), user_id=str(user_id))
            return saved
