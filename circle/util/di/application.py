"""Application layer DI providers."""

from dishka import Scope, provide

from circle.application.usecase.auth import AuthenticateUseCase
from circle.application.usecase.post import (
    CreatePostUseCase,
    GetPostUseCase,
    LikePostUseCase,
    SharePostUseCase,
)
from circle.application.usecase.user import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserActivityUseCase,
    GetUserUseCase,
    UpdateUserProfileUseCase,
)
from circle.domain.service import (
    ActivityService,
    AuthService,
    JWTService,
    PostService,
    ProfileGuard,
    UserService,
)
from circle.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_create_user_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> CreateUserUseCase:
        """Provide create user use case."""
        return CreateUserUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_get_user_use_case(self, profile_guard: ProfileGuard) -> GetUserUseCase:
        """Provide get user use case."""
        return GetUserUseCase(profile_guard=profile_guard)

    @provide(scope=Scope.REQUEST)
    def get_get_user_activity_use_case(
        self, profile_guard: ProfileGuard, activity_service: ActivityService
    ) -> GetUserActivityUseCase:
        """Provide get user activity use case."""
        return GetUserActivityUseCase(
            profile_guard=profile_guard, activity_service=activity_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_user_profile_use_case(
        self, profile_guard: ProfileGuard, user_service: UserService
    ) -> UpdateUserProfileUseCase:
        """Provide update user profile use case."""
        return UpdateUserProfileUseCase(
            profile_guard=profile_guard, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_user_use_case(
        self, profile_guard: ProfileGuard, user_service: UserService
    ) -> DeleteUserUseCase:
        """Provide delete user use case."""
        return DeleteUserUseCase(profile_guard=profile_guard, user_service=user_service)

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_authenticate_use_case(
        self, auth_service: AuthService
    ) -> AuthenticateUseCase:
        """Provide authenticate use case."""
        return AuthenticateUseCase(auth_service=auth_service)

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(
        self, profile_guard: ProfileGuard, post_service: PostService
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(profile_guard=profile_guard, post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(self, post_service: PostService) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_like_post_use_case(
        self, profile_guard: ProfileGuard, post_service: PostService
    ) -> LikePostUseCase:
        """Provide like post use case."""
        return LikePostUseCase(profile_guard=profile_guard, post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_share_post_use_case(
        self, profile_guard: ProfileGuard, post_service: PostService
    ) -> SharePostUseCase:
        """Provide share post use case."""
        return SharePostUseCase(profile_guard=profile_guard, post_service=post_service)
