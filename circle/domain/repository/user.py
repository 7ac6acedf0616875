"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from circle.domain.model.user import User
from circle.domain.value import Email, UserId, Username


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username.

        Args:
            username: The user's username

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by email.

        Args:
            email: The user's email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Insert a new user.

        Uniqueness of username and email is enforced here, atomically with
        the insert.

        Args:
            user: The user to insert

        Returns:
            The inserted user

        Raises:
            DuplicateUsernameError: If the username is taken
            DuplicateEmailError: If the email is taken
        """
        pass

    @abstractmethod
    async def update(self, user: User) -> int:
        """Update an existing user's mutable fields.

        Args:
            user: The user with updated fields

        Returns:
            Number of rows affected

        Raises:
            DuplicateEmailError: If the new email belongs to another user
        """
        pass

    @abstractmethod
    async def delete_by_username(self, username: Username) -> int:
        """Hard-delete a user.

        Args:
            username: Username of the user to delete

        Returns:
            Number of rows removed
        """
        pass
