"""Post, like and share repository interfaces."""

from abc import ABC, abstractmethod
from typing import Optional

from circle.domain.model.post import LikedPost, Post, SharedPost
from circle.domain.value import PostId, UserId


class PostRepository(ABC):
    """Repository for Post aggregate."""

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_author(self, author_id: UserId) -> list[Post]:
        """Find all posts written by a user.

        Args:
            author_id: The author's ID

        Returns:
            Posts by the author, in no particular order
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass


class SharedPostRepository(ABC):
    """Repository for share events."""

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> list[SharedPost]:
        """Find all shares made by a user.

        Args:
            user_id: The sharing user's ID

        Returns:
            Share records, in no particular order
        """
        pass

    @abstractmethod
    async def save(self, shared_post: SharedPost) -> SharedPost:
        """Save a share event.

        Args:
            shared_post: The share to save

        Returns:
            The saved share
        """
        pass


class LikedPostRepository(ABC):
    """Repository for like events."""

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> list[LikedPost]:
        """Find all likes made by a user.

        Args:
            user_id: The liking user's ID

        Returns:
            Like records, in no particular order
        """
        pass

    @abstractmethod
    async def save(self, liked_post: LikedPost) -> LikedPost:
        """Save a like event.

        Args:
            liked_post: The like to save

        Returns:
            The saved like

        Raises:
            DuplicateLikeError: If the user already liked the post
        """
        pass
