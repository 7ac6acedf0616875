"""Post use cases."""

from .create_post import CreatePostUseCase
from .get_post import GetPostUseCase
from .like_post import LikePostUseCase
from .share_post import SharePostUseCase

__all__ = [
    "CreatePostUseCase",
    "GetPostUseCase",
    "LikePostUseCase",
    "SharePostUseCase",
]
