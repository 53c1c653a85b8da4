"""
AEAD Engine — authenticated encryption of secrets with a derived key.

The cipher backend is resolved once at import time from the
``PASSWORD_CRYPTO_CIPHER_BACKEND`` environment variable (``aesgcm`` or
``chacha20``). Both backends use a 96-bit nonce and a 128-bit tag, so the
envelope layout does not depend on the choice.

Security Note:
    Never log plaintext or ciphertext values.
    Nonces are random 96-bit; collision probability negligible under normal usage.
"""
import os
import logging

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM, ChaCha20Poly1305

from .exceptions import AuthenticationError

logger = logging.getLogger("password_crypto")

NONCE_SIZE = 12  # 96-bit nonce
TAG_SIZE = 16  # 128-bit tag

CIPHER_BACKENDS = {
    "aesgcm": AESGCM,
    "chacha20": ChaCha20Poly1305,
}


def _get_cipher_cls() -> type:
    """Return the AEAD cipher class based on PASSWORD_CRYPTO_CIPHER_BACKEND env var."""
    backend = os.environ.get("PASSWORD_CRYPTO_CIPHER_BACKEND", "aesgcm").lower()
    if backend not in CIPHER_BACKENDS:
        logger.warning(
            "Unsupported cipher backend %r, falling back to aesgcm", backend
        )
        return AESGCM
    return CIPHER_BACKENDS[backend]


# Resolve cipher once at module load to prevent encrypt/decrypt mismatch
# if the env var changes mid-process.
CIPHER_CLS = _get_cipher_cls()


def generate_nonce() -> bytes:
    """Return a fresh random nonce. Never reuse one with the same key."""
    return os.urandom(NONCE_SIZE)


def seal(key: bytes, nonce: bytes, plaintext: bytes) -> tuple[bytes, bytes]:
    """Encrypt and authenticate plaintext.

    Args:
        key: 32-byte derived key.
        nonce: 12-byte nonce, unique for this key.
        plaintext: Data to encrypt (may be empty).

    Returns:
        Tuple of (ciphertext, tag).
    """
    cipher = CIPHER_CLS(key)
    sealed = cipher.encrypt(nonce, plaintext, None)
    return sealed[:-TAG_SIZE], sealed[-TAG_SIZE:]


def open_sealed(key: bytes, nonce: bytes, ciphertext: bytes, tag: bytes) -> bytes:
    """Verify the tag and decrypt ciphertext.

    Args:
        key: 32-byte derived key.
        nonce: Nonce used during encryption.
        ciphertext: Encrypted payload without the tag.
        tag: 16-byte authentication tag.

    Returns:
        Decrypted plaintext bytes.

    Raises:
        AuthenticationError: If the tag does not verify.
    """
    cipher = CIPHER_CLS(key)
    try:
        return cipher.decrypt(nonce, ciphertext + tag, None)
    except InvalidTag as err:
        raise AuthenticationError(
            "Decryption failed: wrong master password or corrupted data", err
        ) from err
