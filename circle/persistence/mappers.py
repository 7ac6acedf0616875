"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from circle.domain.model import LikedPost, Post, SharedPost, User
from circle.domain.value import (
    Email,
    LikedPostId,
    PostId,
    SharedPostId,
    UserId,
    Username,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        email=Email(row["email"]),
        password_hash=row["password"],
        nickname=row.get("nickname"),
        profile_pic=row.get("profile_pic"),
        profile_banner=row.get("profile_banner"),
        bio=row.get("bio"),
        followers=[UserId(_uuid(f)) for f in row.get("followers") or []],
        following=[UserId(_uuid(f)) for f in row.get("following") or []],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    The digest is stored in the ``password`` column.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = user.model_dump()
    data["password"] = data.pop("password_hash")
    return data


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model."""
    return Post(
        id=PostId(_uuid(row["id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict."""
    return post.model_dump()


def row_to_liked_post(row: Dict[str, Any]) -> LikedPost:
    """Convert database row to LikedPost domain model."""
    return LikedPost(
        id=LikedPostId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        post_id=PostId(_uuid(row["post_id"])),
        created_at=row["created_at"],
    )


def liked_post_to_dict(liked_post: LikedPost) -> Dict[str, Any]:
    """Convert LikedPost domain model to database dict."""
    return liked_post.model_dump()


def row_to_shared_post(row: Dict[str, Any]) -> SharedPost:
    """Convert database row to SharedPost domain model."""
    return SharedPost(
        id=SharedPostId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        post_id=PostId(_uuid(row["post_id"])),
        created_at=row["created_at"],
    )


def shared_post_to_dict(shared_post: SharedPost) -> Dict[str, Any]:
    """Convert SharedPost domain model to database dict."""
    return shared_post.model_dump()
