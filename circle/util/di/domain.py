"""Domain layer DI providers."""

from dishka import Scope, provide

from circle.config import AuthSettings
from circle.domain.repository import (
    LikedPostRepository,
    PostRepository,
    SharedPostRepository,
    UserRepository,
)
from circle.domain.service import (
    ActivityService,
    AuthService,
    JWTService,
    PasswordService,
    PostService,
    ProfileGuard,
    UserService,
)
from circle.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_password_service(self, auth_settings: AuthSettings) -> PasswordService:
        """Provide password hashing service (holds the CryptContext)."""
        return PasswordService(auth_settings=auth_settings)

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(
        self, user_repository: UserRepository, password_service: PasswordService
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository, password_service=password_service
        )

    @provide
    def get_auth_service(
        self,
        user_repository: UserRepository,
        password_service: PasswordService,
        jwt_service: JWTService,
    ) -> AuthService:
        """Provide email/password authentication service."""
        return AuthService(
            user_repository=user_repository,
            password_service=password_service,
            jwt_service=jwt_service,
        )

    @provide
    def get_profile_guard(
        self,
        jwt_service: JWTService,
        user_service: UserService,
        auth_settings: AuthSettings,
    ) -> ProfileGuard:
        """Provide profile access guard."""
        return ProfileGuard(
            jwt_service=jwt_service,
            user_service=user_service,
            auth_settings=auth_settings,
        )

    @provide
    def get_activity_service(
        self,
        post_repository: PostRepository,
        liked_post_repository: LikedPostRepository,
        shared_post_repository: SharedPostRepository,
    ) -> ActivityService:
        """Provide activity feed service."""
        return ActivityService(
            post_repository=post_repository,
            liked_post_repository=liked_post_repository,
            shared_post_repository=shared_post_repository,
        )

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        liked_post_repository: LikedPostRepository,
        shared_post_repository: SharedPostRepository,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository,
            liked_post_repository=liked_post_repository,
            shared_post_repository=shared_post_repository,
        )
