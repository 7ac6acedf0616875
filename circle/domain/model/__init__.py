"""Domain model entities for Circle."""

from circle.domain.model.activity import ActivityEntry
from circle.domain.model.post import LikedPost, Post, SharedPost
from circle.domain.model.user import User

__all__ = [
    "ActivityEntry",
    "LikedPost",
    "Post",
    "SharedPost",
    "User",
]
