"""Post aggregate root and the like/share events that reference it."""

from datetime import datetime

from pydantic import Field

from circle.domain.model.common import DomainModel
from circle.domain.value import LikedPostId, PostId, SharedPostId, UserId


class Post(DomainModel):
    """Post aggregate root, owned by its author."""

    id: PostId
    author_id: UserId
    content: str = Field(min_length=1, max_length=10000)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


class SharedPost(DomainModel):
    """A user sharing someone's post.

    Has its own identity, distinct from the shared post.
    """

    id: SharedPostId
    user_id: UserId
    post_id: PostId
    created_at: datetime = Field(default_factory=datetime.now)


class LikedPost(DomainModel):
    """A user liking a post (one like per user per post)."""

    id: LikedPostId
    user_id: UserId
    post_id: PostId
    created_at: datetime = Field(default_factory=datetime.now)
