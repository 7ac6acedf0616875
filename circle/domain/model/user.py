"""User aggregate root.

Users sign up with a username, email and password, and follow each other.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from circle.domain.model.common import DomainModel
from circle.domain.value import Email, UserId, Username


class User(DomainModel):
    """User aggregate root.

    The password is only ever held as a one-way digest.
    """

    id: UserId
    username: Username
    email: Email
    password_hash: str = Field(repr=False)
    nickname: Optional[str] = Field(default=None, max_length=255)
    profile_pic: Optional[str] = None
    profile_banner: Optional[str] = None
    bio: Optional[str] = None
    followers: list[UserId] = Field(default_factory=list)
    following: list[UserId] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
