"""Domain value objects for Circle.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules.
"""

from enum import Enum

from pydantic import field_validator
from pydantic.networks import validate_email
from pydantic_core import PydanticCustomError

from circle.domain.value.common import RootValueObject


class ActivityKind(str, Enum):
    """Kind of action recorded in a user's activity feed."""

    POSTED = "POSTED"
    LIKED = "LIKED"
    SHARED = "SHARED"

    @property
    def priority(self) -> int:
        """Order of kinds sharing a timestamp (lower comes first)."""
        return _ACTIVITY_PRIORITY[self]


_ACTIVITY_PRIORITY = {
    ActivityKind.POSTED: 0,
    ActivityKind.LIKED: 1,
    ActivityKind.SHARED: 2,
}


class Username(RootValueObject[str]):
    """Globally unique account name, also used in profile URLs."""

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username is not empty and within length limits."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Username must be 1-255 characters")
        if "/" in v:
            raise ValueError("Username must not contain '/'")
        return v


class Email(RootValueObject[str]):
    """Email address, validated against the address grammar."""

    @field_validator("root")
    @classmethod
    def validate_email_format(cls, v: str) -> str:
        """Validate email with email-validator (no deliverability check).

        Only a bare address is accepted; the display-name form
        ``Name <addr>`` is rejected. The normalized address is stored.
        """
        try:
            _, address = validate_email(v)
        except PydanticCustomError:
            raise ValueError("The email address you entered is invalid")
        if address.casefold() != v.casefold() or len(address) > 255:
            raise ValueError("The email address you entered is invalid")
        return address
