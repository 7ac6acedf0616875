"""Password hashing domain service."""

import logfire

from circle.config import AuthSettings
from circle.util.password import create_crypt_context, hash_password, verify_password

from .base import Service


class PasswordService(Service):
    """Domain service for one-way salted password digests."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize password service.

        Args:
            auth_settings: Authentication settings
        """
        self.context = create_crypt_context(auth_settings)

    def hash(self, password: str) -> str:
        """Hash a plaintext password.

        Args:
            password: Plaintext password

        Returns:
            Salted digest, never equal to the input
        """
        with logfire.span("password_service.hash"):
            return hash_password(self.context, password)

    def verify(self, digest: str, password: str) -> bool:
        """Check a candidate password against a stored digest.

        Args:
            digest: Stored digest
            password: Candidate plaintext password

        Returns:
            True if the candidate matches
        """
        with logfire.span("password_service.verify"):
            valid = verify_password(self.context, digest, password)
            if not valid:
                logfire.info("Password mismatch")
            return valid
