"""Password hashing utilities."""

from passlib.context import CryptContext

from circle.config import AuthSettings


def create_crypt_context(settings: AuthSettings) -> CryptContext:
    """Build the passlib context used for user passwords.

    ``bcrypt_sha256`` pre-hashes the password, so passwords longer than
    bcrypt's 72-byte input limit are not truncated. Plain ``bcrypt``
    digests still verify and are marked for re-hashing.

    Args:
        settings: Authentication settings

    Returns:
        CryptContext with the configured work factor
    """
    return CryptContext(
        schemes=["bcrypt_sha256", "bcrypt"],
        deprecated="auto",
        bcrypt_sha256__rounds=settings.bcrypt_rounds,
        bcrypt__rounds=settings.bcrypt_rounds,
    )


def hash_password(context: CryptContext, password: str) -> str:
    """Hash a plaintext password."""
    return context.hash(password)


def verify_password(context: CryptContext, digest: str, password: str) -> bool:
    """Check a plaintext password against a stored digest.

    A digest passlib does not recognise counts as a mismatch.
    """
    try:
        return context.verify(password, digest)
    except (ValueError, TypeError):
        return False
