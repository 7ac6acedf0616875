"""Repository interfaces for Circle domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from circle.domain.repository.post import (
    LikedPostRepository,
    PostRepository,
    SharedPostRepository,
)
from circle.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "PostRepository",
    "SharedPostRepository",
    "LikedPostRepository",
]
