"""Password Crypto — Master-password encryption of secrets at rest.

Security Note (Threat Model):
    Secrets are derived and decrypted in process memory. Python strings are
    immutable and cannot be wiped, so plaintext and the master password may
    remain in memory until garbage-collected. Derived keys are held in a
    bytearray and overwritten after use. Anyone holding MASTER_BONITA_PWD can
    decrypt every envelope; rotating it is out of scope.
"""

from .version import __version__
from .config import (
    ENV_VAR_NAME,
    CryptoConfig,
    generate_master_password,
    is_master_password_configured,
)
from .crypto import (
    PasswordCrypto,
    decrypt,
    decrypt_if_needed,
    decrypt_with_password,
    encrypt,
    encrypt_if_configured,
    encrypt_if_needed,
    encrypt_with_password,
)
from .detector import MIN_ENCRYPTED_LENGTH, is_encrypted
from .exceptions import (
    AuthenticationError,
    ConfigurationError,
    CryptoError,
    EnvelopeError,
)
from .fields import decrypt_fields, encrypt_fields

__all__ = [
    "__version__",
    "ENV_VAR_NAME",
    "MIN_ENCRYPTED_LENGTH",
    "CryptoConfig",
    "PasswordCrypto",
    "encrypt",
    "decrypt",
    "encrypt_with_password",
    "decrypt_with_password",
    "encrypt_if_needed",
    "decrypt_if_needed",
    "encrypt_if_configured",
    "is_encrypted",
    "is_master_password_configured",
    "generate_master_password",
    "encrypt_fields",
    "decrypt_fields",
    "CryptoError",
    "ConfigurationError",
    "EnvelopeError",
    "AuthenticationError",
]
