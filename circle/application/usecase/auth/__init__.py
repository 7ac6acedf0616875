"""Authentication use cases."""

from .authenticate import AuthenticateUseCase

__all__ = ["AuthenticateUseCase"]
