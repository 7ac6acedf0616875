"""User use cases."""

from .create_user import CreateUserUseCase
from .delete_user import DeleteUserUseCase
from .get_user import GetUserUseCase
from .get_user_activity import GetUserActivityUseCase
from .update_user_profile import UpdateUserProfileUseCase

__all__ = [
    "CreateUserUseCase",
    "DeleteUserUseCase",
    "GetUserUseCase",
    "GetUserActivityUseCase",
    "UpdateUserProfileUseCase",
]
