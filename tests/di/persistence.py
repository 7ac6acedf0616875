"""Mock persistence providers for testing."""

from dishka import Scope, provide

from circle.domain.repository import (
    LikedPostRepository,
    PostRepository,
    SharedPostRepository,
    UserRepository,
)
from circle.persistence.repository.inmemory import (
    InMemoryLikedPostRepository,
    InMemoryPostRepository,
    InMemorySharedPostRepository,
    InMemoryUserRepository,
)
from circle.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped so state survives across the requests of one
    container; every test builds its own container.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_post_repository(self) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository()

    @provide(scope=Scope.APP)
    def get_liked_post_repository(self) -> LikedPostRepository:
        """Provide in-memory like repository."""
        return InMemoryLikedPostRepository()

    @provide(scope=Scope.APP)
    def get_shared_post_repository(self) -> SharedPostRepository:
        """Provide in-memory share repository."""
        return InMemorySharedPostRepository()
