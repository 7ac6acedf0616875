"""Test configuration and fixtures."""

import os
from datetime import datetime
from uuid import uuid4

import logfire
import pytest

# Cheap bcrypt for tests; read by Settings when the container resolves it
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")
os.environ.setdefault("AUTH__JWT_SECRET", "test-secret")
os.environ.setdefault("ENVIRONMENT", "test")

logfire.configure(send_to_logfire=False, console=False)

from circle.config import AuthSettings  # noqa: E402
from circle.domain.model import User  # noqa: E402
from circle.domain.value import Email, UserId, Username  # noqa: E402


def make_user(
    username: str = "alice",
    email: str | None = None,
    password_hash: str = "$2b$04$notarealdigestnotarealdigestnotarealdigestnotareal",
    **overrides,
) -> User:
    """Helper to build a User without going through the service."""
    now = datetime.now()
    return User(
        id=UserId(uuid4()),
        username=Username(username),
        email=Email(email or f"{username}@example.com"),
        password_hash=password_hash,
        created_at=overrides.pop("created_at", now),
        updated_at=overrides.pop("updated_at", now),
        **overrides,
    )


@pytest.fixture
def auth_settings() -> AuthSettings:
    """Auth settings with a fixed secret and cheap hashing."""
    return AuthSettings(jwt_secret="unit-test-secret", bcrypt_rounds=4)
