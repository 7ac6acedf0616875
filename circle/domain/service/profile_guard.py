"""Profile access guard.

Every profile read or mutation passes through ``ProfileGuard.check``:

    START -> TOKEN_CHECKED -> TARGET_RESOLVED -> AUTHORIZED -> APPLIED

Any failure ends in REJECTED with one of MissingTokenError,
InvalidTokenError, UserNotFoundError or NotAuthorizedError. The caller
marks APPLIED once the operation succeeds.
"""

from dataclasses import dataclass
from enum import Enum
from uuid import UUID

import logfire

from circle.config import AuthSettings
from circle.domain.error import (
    DomainError,
    InvalidTokenError,
    NotAuthorizedError,
    NotFoundError,
)
from circle.domain.model import User
from circle.domain.value import UserId, Username

from .base import Service
from .jwt_service import JWTService
from .user_service import UserService


class GuardStage(str, Enum):
    """Stage reached by a guarded profile request."""

    START = "start"
    TOKEN_CHECKED = "token_checked"
    TARGET_RESOLVED = "target_resolved"
    AUTHORIZED = "authorized"
    APPLIED = "applied"
    REJECTED = "rejected"


@dataclass
class ProfileAccess:
    """Outcome of a successful guard check."""

    actor_id: UserId
    target: User
    stage: GuardStage = GuardStage.AUTHORIZED

    @property
    def is_owner(self) -> bool:
        return self.actor_id == self.target.id

    def applied(self) -> None:
        """Record that the guarded operation completed."""
        self.stage = GuardStage.APPLIED
        logfire.info(
            "Profile guard",
            stage=self.stage.value,
            actor_id=str(self.actor_id),
            target_id=str(self.target.id),
        )


class ProfileGuard(Service):
    """Authorizes access to a user's profile."""

    def __init__(
        self,
        jwt_service: JWTService,
        user_service: UserService,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize profile guard.

        Args:
            jwt_service: Token service
            user_service: User domain service
            auth_settings: Authentication settings (ownership policy)
        """
        self.jwt_service = jwt_service
        self.user_service = user_service
        self.auth_settings = auth_settings

    async def check(
        self,
        username: Username,
        authorization: str | None,
        require_owner: bool = False,
    ) -> ProfileAccess:
        """Resolve the actor and target of a profile request.

        Args:
            username: Username of the profile being accessed
            authorization: Raw Authorization header value
            require_owner: Whether the actor must own the profile
                (ignored when ownership enforcement is disabled)

        Returns:
            Actor id and resolved target user

        Raises:
            MissingTokenError: No token supplied
            InvalidTokenError: Token does not decode to a user identity
            UserNotFoundError: No user has the target username
            NotAuthorizedError: Actor may not modify the target
        """
        with logfire.span(
            "profile_guard.check",
            username=username.root,
            require_owner=require_owner,
        ):
            stage = GuardStage.START
            try:
                token = self.jwt_service.extract_bearer(authorization)
                payload = self.jwt_service.verify_token(token)
                actor_id = _parse_user_id(payload.user_id)
                stage = GuardStage.TOKEN_CHECKED

                target = await self.user_service.get_by_username(username)
                stage = GuardStage.TARGET_RESOLVED

                if (
                    require_owner
                    and self.auth_settings.enforce_profile_ownership
                    and actor_id != target.id
                ):
                    raise NotAuthorizedError("profile", username.root, str(actor_id))
            except DomainError as e:
                logfire.warn(
                    "Profile guard",
                    stage=GuardStage.REJECTED.value,
                    after=stage.value,
                    error=type(e).__name__,
                )
                raise

            access = ProfileAccess(actor_id=actor_id, target=target)
            logfire.info(
                "Profile guard",
                stage=access.stage.value,
                actor_id=str(actor_id),
                target_id=str(target.id),
                owner=access.is_owner,
            )
            return access

    async def authenticate(self, authorization: str | None) -> UserId:
        """Resolve only the actor of a request.

        Tokens outlive a profile delete, so the actor is looked up.

        Raises:
            MissingTokenError: No token supplied
            InvalidTokenError: Token does not decode to an existing user
        """
        with logfire.span("profile_guard.authenticate"):
            token = self.jwt_service.extract_bearer(authorization)
            payload = self.jwt_service.verify_token(token)
            actor_id = _parse_user_id(payload.user_id)
            try:
                await self.user_service.get_by_id(actor_id)
            except NotFoundError:
                logfire.warn("Token of a deleted user", actor_id=str(actor_id))
                raise InvalidTokenError("Token user no longer exists")
            return actor_id


def _parse_user_id(value: str) -> UserId:
    try:
        return UserId(UUID(value))
    except ValueError:
        raise InvalidTokenError("Token user id is not a UUID")
