"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from circle.domain.error import DuplicateEmailError, DuplicateUsernameError
from circle.domain.model import User
from circle.domain.repository import UserRepository
from circle.domain.value import Email, UserId, Username
from circle.persistence.mappers import row_to_user, user_to_dict
from circle.persistence.tables import (
    EMAIL_CONSTRAINT,
    USERNAME_CONSTRAINT,
    users_table,
)


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username."""
        stmt = select(users_table).where(users_table.c.username == username.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by email."""
        stmt = select(users_table).where(users_table.c.email == email.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def create(self, user: User) -> User:
        """Insert a new user.

        The insert runs in a SAVEPOINT so a unique violation leaves the
        surrounding transaction usable.

        Raises:
            DuplicateUsernameError: If the username is taken
            DuplicateEmailError: If the email is taken
        """
        stmt = insert(users_table).values(**user_to_dict(user))
        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            _raise_duplicate(e, user)
            raise
        return user

    async def update(self, user: User) -> int:
        """Update a user's mutable fields.

        Raises:
            DuplicateEmailError: If the new email belongs to another user
        """
        values = user_to_dict(user)
        for immutable in ("id", "username", "created_at"):
            values.pop(immutable)

        stmt = update(users_table).where(users_table.c.id == user.id).values(**values)
        try:
            async with self.session.begin_nested():
                result = await self.session.execute(stmt)
        except IntegrityError as e:
            _raise_duplicate(e, user)
            raise
        return result.rowcount

    async def delete_by_username(self, username: Username) -> int:
        """Hard-delete a user; posts, likes and shares cascade."""
        stmt = delete(users_table).where(users_table.c.username == username.root)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount


def _raise_duplicate(error: IntegrityError, user: User) -> None:
    message = str(error.orig)
    if USERNAME_CONSTRAINT in message:
        raise DuplicateUsernameError(user.username.root) from error
    if EMAIL_CONSTRAINT in message:
        raise DuplicateEmailError(user.email.root) from error
