"""
Encryptedness heuristic.

``is_encrypted`` only looks at the shape of a string: long enough and made of
Base64 characters. A long plaintext that happens to look like Base64 is
classified as encrypted. Callers rely on this permissive check to handle
configuration values that may hold either plaintext or an envelope, so it is
not a format validator and must never attempt decryption.
"""
import re
from typing import Any

# base64 of the smallest envelope (salt + nonce + tag = 44 bytes)
MIN_ENCRYPTED_LENGTH = 60

_BASE64_CHARS = re.compile(r"[A-Za-z0-9+/=]+")


def is_encrypted(text: Any) -> bool:
    """Return True if text looks like an encrypted envelope.

    Args:
        text: Value to classify. Anything that is not a string is False.

    Returns:
        True when text is at least MIN_ENCRYPTED_LENGTH characters long and
        contains only Base64 alphabet characters.
    """
    if not isinstance(text, str) or not text.strip():
        return False
    if len(text) < MIN_ENCRYPTED_LENGTH:
        return False
    return _BASE64_CHARS.fullmatch(text) is not None
