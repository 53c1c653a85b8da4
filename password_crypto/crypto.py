"""
Password Crypto — public API for encrypting secrets with the master password.

Provides:
- ``encrypt(text)`` / ``decrypt(text)`` — use MASTER_BONITA_PWD from the environment
- ``encrypt_with_password`` / ``decrypt_with_password`` — explicit master password
- ``encrypt_if_needed`` / ``decrypt_if_needed`` — idempotent variants for
  configuration values that may already be encrypted (or not)
- ``PasswordCrypto`` — the same operations bound to a ``CryptoConfig``

Every call to ``encrypt`` uses a fresh random salt and nonce, so encrypting the
same text twice gives two different envelopes.

Security Note:
    Never log plaintext, ciphertext or key material. Derived keys live in a
    bytearray that is overwritten as soon as the cipher call returns.
"""
import logging
from typing import Optional

from .aead import generate_nonce, open_sealed, seal
from .config import CryptoConfig, get_master_password, is_master_password_configured
from .detector import is_encrypted
from .envelope import decode_envelope, encode_envelope
from .exceptions import CryptoError
from .kdf import derive_key, generate_salt

logger = logging.getLogger("password_crypto")


def _is_blank(text: Optional[str]) -> bool:
    return text is None or not text.strip()


def _wipe(buffer: bytearray) -> None:
    buffer[:] = bytes(len(buffer))


# ---------------------------------------------------------------------------
# Explicit master password
# ---------------------------------------------------------------------------

def encrypt_with_password(plaintext: str, master_password: str) -> str:
    """Encrypt text with the given master password.

    Args:
        plaintext: Text to encrypt (may be empty, not None).
        master_password: Master password used for key derivation.

    Returns:
        Base64 envelope string.

    Raises:
        ValueError: If plaintext or master_password is None.
    """
    if plaintext is None:
        raise ValueError("Plain text cannot be null")
    if master_password is None:
        raise ValueError("Master password cannot be null")

    salt = generate_salt()
    nonce = generate_nonce()
    key = bytearray(derive_key(master_password, salt))
    try:
        ciphertext, tag = seal(key, nonce, plaintext.encode("utf-8"))
    finally:
        _wipe(key)
    return encode_envelope(salt, nonce, ciphertext, tag)


def decrypt_with_password(encrypted_text: str, master_password: str) -> str:
    """Decrypt an envelope with the given master password.

    Args:
        encrypted_text: Base64 envelope produced by ``encrypt_with_password``.
        master_password: Master password used for key derivation.

    Returns:
        The original text.

    Raises:
        ValueError: If encrypted_text is None or blank, or master_password is None.
        EnvelopeError: If encrypted_text is not valid Base64 or is too short.
        AuthenticationError: If the master password is wrong or data is corrupted.
    """
    if _is_blank(encrypted_text):
        raise ValueError("Encrypted text cannot be null or empty")
    if master_password is None:
        raise ValueError("Master password cannot be null")

    envelope = decode_envelope(encrypted_text)
    key = bytearray(derive_key(master_password, envelope.salt))
    try:
        plaintext = open_sealed(key, envelope.nonce, envelope.ciphertext, envelope.tag)
    finally:
        _wipe(key)
    try:
        return plaintext.decode("utf-8")
    except UnicodeDecodeError as err:
        raise CryptoError("Decrypted data is not valid UTF-8 text", err) from err


# ---------------------------------------------------------------------------
# Master password from environment
# ---------------------------------------------------------------------------

def encrypt(plaintext: str) -> str:
    """Encrypt text with the master password from MASTER_BONITA_PWD.

    Raises:
        ValueError: If plaintext is None.
        ConfigurationError: If the master password is not configured.
    """
    if plaintext is None:
        raise ValueError("Plain text cannot be null")
    return encrypt_with_password(plaintext, get_master_password())


def decrypt(encrypted_text: str) -> str:
    """Decrypt an envelope with the master password from MASTER_BONITA_PWD.

    Raises:
        ValueError: If encrypted_text is None or blank.
        ConfigurationError: If the master password is not configured.
        EnvelopeError: If encrypted_text is malformed.
        AuthenticationError: If the master password is wrong or data is corrupted.
    """
    if _is_blank(encrypted_text):
        raise ValueError("Encrypted text cannot be null or empty")
    return decrypt_with_password(encrypted_text, get_master_password())


def encrypt_if_needed(text: Optional[str]) -> Optional[str]:
    """Encrypt text unless it is blank or already looks encrypted."""
    if _is_blank(text) or is_encrypted(text):
        return text
    return encrypt(text)


def decrypt_if_needed(text: Optional[str]) -> Optional[str]:
    """Decrypt text if it looks encrypted; otherwise return it unchanged.

    Any decryption failure returns the original text: values that merely
    look like Base64 are treated as plaintext.
    """
    if _is_blank(text) or not is_encrypted(text):
        return text
    try:
        return decrypt(text)
    except Exception as err:
        logger.debug(
            "decrypt_if_needed: returning value unchanged (%s)", type(err).__name__
        )
        return text


def encrypt_if_configured(text: Optional[str]) -> Optional[str]:
    """Encrypt text only when a master password is configured.

    Used when persisting auth configurations: without MASTER_BONITA_PWD the
    value is stored as given.
    """
    if not is_master_password_configured():
        return text
    return encrypt_if_needed(text)


# ---------------------------------------------------------------------------
# Explicit configuration
# ---------------------------------------------------------------------------

class PasswordCrypto:
    """Encrypt and decrypt secrets with the master password of a CryptoConfig.

    Use this when the master password is resolved once at the edge of the
    application instead of being read from the environment on every call.
    """

    def __init__(self, config: CryptoConfig):
        self._config = config

    @classmethod
    def from_env(cls) -> "PasswordCrypto":
        """Build a PasswordCrypto from MASTER_BONITA_PWD."""
        return cls(CryptoConfig.from_env())

    def _master_password(self) -> str:
        return self._config.master_password.get_secret_value()

    def encrypt(self, plaintext: str) -> str:
        return encrypt_with_password(plaintext, self._master_password())

    def decrypt(self, encrypted_text: str) -> str:
        return decrypt_with_password(encrypted_text, self._master_password())

    def is_encrypted(self, text: Optional[str]) -> bool:
        return is_encrypted(text)

    def encrypt_if_needed(self, text: Optional[str]) -> Optional[str]:
        if _is_blank(text) or is_encrypted(text):
            return text
        return self.encrypt(text)

    def decrypt_if_needed(self, text: Optional[str]) -> Optional[str]:
        if _is_blank(text) or not is_encrypted(text):
            return text
        try:
            return self.decrypt(text)
        except Exception as err:
            logger.debug(
                "decrypt_if_needed: returning value unchanged (%s)",
                type(err).__name__,
            )
            return text

    def __repr__(self) -> str:
        return f"<PasswordCrypto config={self._config!r}>"
