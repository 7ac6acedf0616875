"""In-memory post, like and share repositories for testing."""

from typing import Optional

from circle.domain.error import DuplicateLikeError
from circle.domain.model.post import LikedPost, Post, SharedPost
from circle.domain.repository.post import (
    LikedPostRepository,
    PostRepository,
    SharedPostRepository,
)
from circle.domain.value import PostId, UserId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_by_author(self, author_id: UserId) -> list[Post]:
        """Find all posts by an author."""
        return [p for p in self._posts.values() if p.author_id == author_id]

    async def save(self, post: Post) -> Post:
        """Save a post."""
        self._posts[post.id] = post
        return post


class InMemoryLikedPostRepository(LikedPostRepository):
    """In-memory implementation of LikedPostRepository for testing."""

    def __init__(self) -> None:
        self._likes: list[LikedPost] = []

    async def find_by_user(self, user_id: UserId) -> list[LikedPost]:
        """Find all likes by a user."""
        return [like for like in self._likes if like.user_id == user_id]

    async def save(self, liked_post: LikedPost) -> LikedPost:
        """Save a like.

        Raises:
            DuplicateLikeError: If the user already liked the post
        """
        for like in self._likes:
            if (
                like.user_id == liked_post.user_id
                and like.post_id == liked_post.post_id
            ):
                raise DuplicateLikeError(str(liked_post.post_id))

        self._likes.append(liked_post)
        return liked_post


class InMemorySharedPostRepository(SharedPostRepository):
    """In-memory implementation of SharedPostRepository for testing."""

    def __init__(self) -> None:
        self._shares: list[SharedPost] = []

    async def find_by_user(self, user_id: UserId) -> list[SharedPost]:
        """Find all shares by a user."""
        return [s for s in self._shares if s.user_id == user_id]

    async def save(self, shared_post: SharedPost) -> SharedPost:
        """Save a share."""
        self._shares.append(shared_post)
        return shared_post
