"""In-memory repository implementations for testing."""

from .post import (
    InMemoryLikedPostRepository,
    InMemoryPostRepository,
    InMemorySharedPostRepository,
)
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryLikedPostRepository",
    "InMemoryPostRepository",
    "InMemorySharedPostRepository",
    "InMemoryUserRepository",
]
