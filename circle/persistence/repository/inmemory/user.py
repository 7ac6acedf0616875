"""In-memory user repository for testing."""

from typing import Optional

from circle.domain.error import DuplicateEmailError, DuplicateUsernameError
from circle.domain.model.user import User
from circle.domain.repository.user import UserRepository
from circle.domain.value import Email, UserId, Username


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username."""
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def create(self, user: User) -> User:
        """Insert a user, enforcing unique username and email."""
        if await self.find_by_username(user.username):
            raise DuplicateUsernameError(user.username.root)
        if await self.find_by_email(user.email):
            raise DuplicateEmailError(user.email.root)
        self._users[user.id] = user
        return user

    async def update(self, user: User) -> int:
        """Replace a stored user."""
        if user.id not in self._users:
            return 0
        owner = await self.find_by_email(user.email)
        if owner and owner.id != user.id:
            raise DuplicateEmailError(user.email.root)
        self._users[user.id] = user
        return 1

    async def delete_by_username(self, username: Username) -> int:
        """Remove a user by username."""
        user = await self.find_by_username(username)
        if not user:
            return 0
        del self._users[user.id]
        return 1
