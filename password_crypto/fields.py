"""
Field helpers — encrypt or decrypt selected values of a configuration mapping.

Auth configurations (basic auth password, bearer token, API key value, OAuth2
client secret) are stored as dictionaries where only some fields are secret.
These helpers return a copy with those fields passed through the idempotent
``*_if_needed`` operations; other fields are copied as they are.
"""
from collections.abc import Iterable, Mapping
from typing import Any, Callable, Optional

from .crypto import PasswordCrypto, decrypt_if_needed, encrypt_if_configured


def _transform_fields(
    data: Mapping[str, Any],
    fields: Iterable[str],
    transform: Callable[[Optional[str]], Optional[str]],
) -> dict[str, Any]:
    result = dict(data)
    for name in fields:
        value = result.get(name)
        if isinstance(value, str):
            result[name] = transform(value)
    return result


def encrypt_fields(
    data: Mapping[str, Any],
    fields: Iterable[str],
    crypto: Optional[PasswordCrypto] = None,
) -> dict[str, Any]:
    """Return a copy of data with the named string fields encrypted.

    Args:
        data: Configuration mapping; never mutated.
        fields: Names of the secret fields.
        crypto: Explicit PasswordCrypto. When omitted, fields are encrypted
            with MASTER_BONITA_PWD if it is configured, and left as they are
            otherwise.

    Returns:
        New dict with secret fields encrypted. Values that already look
        encrypted are kept unchanged.
    """
    transform = crypto.encrypt_if_needed if crypto is not None else encrypt_if_configured
    return _transform_fields(data, fields, transform)


def decrypt_fields(
    data: Mapping[str, Any],
    fields: Iterable[str],
    crypto: Optional[PasswordCrypto] = None,
) -> dict[str, Any]:
    """Return a copy of data with the named string fields decrypted.

    Fields that do not look encrypted, or fail to decrypt, are kept as they are.
    """
    transform = crypto.decrypt_if_needed if crypto is not None else decrypt_if_needed
    return _transform_fields(data, fields, transform)
