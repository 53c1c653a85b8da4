"""
Key Derivation — PBKDF2-HMAC-SHA256 keys from the master password.

The work factor is a fixed constant; it is not tunable per call so that
every envelope produced by this package can be opened by any other call
holding the same master password.

Security Note:
    Never log the master password or derived key material.
"""
import os

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

SALT_SIZE = 16  # 128-bit salt
KEY_LENGTH = 32  # AES-256
PBKDF2_ITERATIONS = 310_000


def generate_salt() -> bytes:
    """Return a fresh random salt for key derivation."""
    return os.urandom(SALT_SIZE)


def derive_key(master_password: str, salt: bytes) -> bytes:
    """Derive a 32-byte encryption key using PBKDF2-HMAC-SHA256.

    Args:
        master_password: The shared master password.
        salt: Random 16-byte salt stored alongside the ciphertext.

    Returns:
        32-byte derived key.

    Raises:
        ValueError: If salt is not exactly SALT_SIZE bytes.
    """
    if len(salt) != SALT_SIZE:
        raise ValueError(
            f"salt must be exactly {SALT_SIZE} bytes, got {len(salt)}"
        )
    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=KEY_LENGTH,
        salt=salt,
        iterations=PBKDF2_ITERATIONS,
    )
    return kdf.derive(master_password.encode("utf-8"))
