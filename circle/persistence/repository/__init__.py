"""PostgreSQL repository implementations."""

from circle.persistence.repository.post import (
    PostgresLikedPostRepository,
    PostgresPostRepository,
    PostgresSharedPostRepository,
)
from circle.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresPostRepository",
    "PostgresLikedPostRepository",
    "PostgresSharedPostRepository",
]
