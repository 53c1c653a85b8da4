"""Password Crypto exceptions.

All failures that happen after argument validation are reported as
``CryptoError`` (or one of its subclasses). Caller misuse, such as passing
``None`` to ``encrypt``, is reported as a plain ``ValueError``.
"""
from typing import Optional


class CryptoError(Exception):
    """Raised when a cryptographic operation fails."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause


class ConfigurationError(CryptoError):
    """The master password is not configured."""


class EnvelopeError(CryptoError):
    """Encrypted text is not a well-formed envelope."""


class AuthenticationError(CryptoError):
    """Tag verification failed: wrong master password or corrupted data."""
