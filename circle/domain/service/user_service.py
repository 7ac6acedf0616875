"""User domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from circle.domain.error import (
    DuplicateEmailError,
    DuplicateUsernameError,
    InvalidEmailError,
    NotFoundError,
    PersistenceError,
    UserNotFoundError,
)
from circle.domain.model import User
from circle.domain.repository import UserRepository
from circle.domain.value import Email, UserId, Username

from .base import Service
from .password_service import PasswordService


def parse_email(email: str) -> Email:
    """Validate an email address.

    Raises:
        InvalidEmailError: If the address is malformed
    """
    try:
        return Email(email)
    except PydanticValidationError:
        raise InvalidEmailError(email)


class UserService(Service):
    """Domain service for the user directory."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordService,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            password_service: Password hashing service
        """
        self.user_repository = user_repository
        self.password_service = password_service

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_by_username(self, username: Username) -> User:
        """Get user by username.

        Args:
            username: Username

        Returns:
            User entity

        Raises:
            UserNotFoundError: If no user has that username
        """
        with logfire.span("user_service.get_by_username", username=username.root):
            user = await self.user_repository.find_by_username(username)
            if not user:
                logfire.warn("User not found", username=username.root)
                raise UserNotFoundError(username.root)
            logfire.info("User found", username=username.root, user_id=str(user.id))
            return user

    async def create_user(
        self,
        username: Username,
        email: str,
        password: str,
        nickname: str | None = None,
    ) -> User:
        """Register a new user.

        The lookups below only decide which conflict is reported first;
        the repository insert enforces uniqueness atomically.

        Args:
            username: Requested username
            email: Email address (validated here)
            password: Plaintext password (hashed before storage)
            nickname: Optional display name

        Returns:
            Created user

        Raises:
            InvalidEmailError: If the email is malformed
            DuplicateUsernameError: If the username is taken
            DuplicateEmailError: If the email is taken
        """
        with logfire.span("user_service.create_user", username=username.root):
            valid_email = parse_email(email)

            if await self.user_repository.find_by_username(username):
                logfire.warn("Username already taken", username=username.root)
                raise DuplicateUsernameError(username.root)

            if await self.user_repository.find_by_email(valid_email):
                logfire.warn("Email already taken", username=username.root)
                raise DuplicateEmailError(valid_email.root)

            now = datetime.now()
            user = User(
                id=UserId(uuid4()),
                username=username,
                email=valid_email,
                password_hash=self.password_service.hash(password),
                nickname=nickname,
                created_at=now,
                updated_at=now,
            )

            created = await self.user_repository.create(user)
            logfire.info("User created", user_id=str(created.id), username=username.root)
            return created

    async def update_profile(
        self,
        user: User,
        nickname: str | None = None,
        email: str | None = None,
        password: str | None = None,
    ) -> User:
        """Apply a profile update.

        Fields left as None keep their current value.

        Args:
            user: User to update
            nickname: New nickname
            email: New email (validated, must stay unique)
            password: New plaintext password (re-hashed)

        Returns:
            Updated user

        Raises:
            InvalidEmailError: If the new email is malformed
            DuplicateEmailError: If the new email belongs to another user
            PersistenceError: If the store reports no rows affected
        """
        with logfire.span("user_service.update_profile", user_id=str(user.id)):
            changes: dict = {"updated_at": datetime.now()}

            if nickname is not None:
                changes["nickname"] = nickname

            if email is not None:
                valid_email = parse_email(email)
                if valid_email != user.email:
                    owner = await self.user_repository.find_by_email(valid_email)
                    if owner and owner.id != user.id:
                        logfire.warn("Email already taken", user_id=str(user.id))
                        raise DuplicateEmailError(valid_email.root)
                changes["email"] = valid_email

            if password is not None:
                changes["password_hash"] = self.password_service.hash(password)

            updated = user.model_copy(update=changes)
            rows = await self.user_repository.update(updated)
            if rows == 0:
                logfire.error("Profile update affected no rows", user_id=str(user.id))
                raise PersistenceError("Failed to update the profile.")

            logfire.info(
                "Profile updated",
                user_id=str(user.id),
                fields=sorted(k for k in changes if k != "updated_at"),
            )
            return updated

    async def delete_user(self, user: User) -> None:
        """Hard-delete a user.

        Args:
            user: User to delete

        Raises:
            PersistenceError: If the store removed no rows
        """
        with logfire.span("user_service.delete_user", user_id=str(user.id)):
            rows = await self.user_repository.delete_by_username(user.username)
            if rows == 0:
                logfire.error("User delete removed no rows", user_id=str(user.id))
                raise PersistenceError("Failed to destroy the user.")
            logfire.info("User deleted", user_id=str(user.id))
