"""Domain services."""

from .activity_service import ActivityService, sort_activity
from .auth_service import AuthService
from .base import Service
from .jwt_service import JWTService
from .password_service import PasswordService
from .post_service import PostService
from .profile_guard import GuardStage, ProfileAccess, ProfileGuard
from .user_service import UserService

__all__ = [
    "ActivityService",
    "AuthService",
    "GuardStage",
    "JWTService",
    "PasswordService",
    "PostService",
    "ProfileAccess",
    "ProfileGuard",
    "Service",
    "UserService",
    "sort_activity",
]
