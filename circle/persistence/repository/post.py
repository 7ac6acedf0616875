"""PostgreSQL implementations of post, like and share repositories."""

from typing import List, Optional

from sqlalchemy import insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from circle.domain.error import DuplicateLikeError
from circle.domain.model import LikedPost, Post, SharedPost
from circle.domain.repository import (
    LikedPostRepository,
    PostRepository,
    SharedPostRepository,
)
from circle.domain.value import PostId, UserId
from circle.persistence.mappers import (
    liked_post_to_dict,
    post_to_dict,
    row_to_liked_post,
    row_to_post,
    row_to_shared_post,
    shared_post_to_dict,
)
from circle.persistence.tables import (
    LIKE_CONSTRAINT,
    liked_posts_table,
    posts_table,
    shared_posts_table,
)


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def find_by_author(self, author_id: UserId) -> List[Post]:
        """Find all posts by an author."""
        stmt = select(posts_table).where(posts_table.c.author_id == author_id)
        result = await self.session.execute(stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def save(self, post: Post) -> Post:
        """Save a post (create)."""
        stmt = insert(posts_table).values(**post_to_dict(post))
        await self.session.execute(stmt)
        await self.session.flush()
        return post


class PostgresLikedPostRepository(LikedPostRepository):
    """PostgreSQL implementation of LikedPostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_user(self, user_id: UserId) -> List[LikedPost]:
        """Find all likes by a user."""
        stmt = select(liked_posts_table).where(liked_posts_table.c.user_id == user_id)
        result = await self.session.execute(stmt)
        return [row_to_liked_post(row._asdict()) for row in result.fetchall()]

    async def save(self, liked_post: LikedPost) -> LikedPost:
        """Save a like.

        Raises:
            DuplicateLikeError: If the user already liked the post
        """
        stmt = insert(liked_posts_table).values(**liked_post_to_dict(liked_post))
        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            if LIKE_CONSTRAINT in str(e.orig):
                raise DuplicateLikeError(str(liked_post.post_id)) from e
            raise
        return liked_post


class PostgresSharedPostRepository(SharedPostRepository):
    """PostgreSQL implementation of SharedPostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_user(self, user_id: UserId) -> List[SharedPost]:
        """Find all shares by a user."""
        stmt = select(shared_posts_table).where(shared_posts_table.c.user_id == user_id)
        result = await self.session.execute(stmt)
        return [row_to_shared_post(row._asdict()) for row in result.fetchall()]

    async def save(self, shared_post: SharedPost) -> SharedPost:
        """Save a share."""
        stmt = insert(shared_posts_table).values(**shared_post_to_dict(shared_post))
        await self.session.execute(stmt)
        await self.session.flush()
        return shared_post
