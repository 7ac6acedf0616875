"""Domain value objects for Circle."""

from circle.domain.value.identifiers import (
    LikedPostId,
    PostId,
    SharedPostId,
    UserId,
)
from circle.domain.value.types import ActivityKind, Email, Username

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "SharedPostId",
    "LikedPostId",
    # Types
    "ActivityKind",
    "Email",
    "Username",
]
