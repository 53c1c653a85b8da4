"""
Envelope Codec — transport encoding of encrypted secrets.

Format: base64([salt 16B][nonce 12B][ciphertext][tag 16B])
"""
import base64
import binascii
from typing import NamedTuple

from .aead import NONCE_SIZE, TAG_SIZE
from .exceptions import EnvelopeError
from .kdf import SALT_SIZE

# Smallest possible envelope: an encrypted empty string.
MIN_ENVELOPE_SIZE = SALT_SIZE + NONCE_SIZE + TAG_SIZE


class Envelope(NamedTuple):
    salt: bytes
    nonce: bytes
    ciphertext: bytes
    tag: bytes


def encode_envelope(salt: bytes, nonce: bytes, ciphertext: bytes, tag: bytes) -> str:
    """Concatenate the envelope parts and return them as standard Base64."""
    return base64.b64encode(salt + nonce + ciphertext + tag).decode("ascii")


def decode_envelope(text: str) -> Envelope:
    """Split a Base64 envelope back into its parts.

    Args:
        text: Envelope string produced by ``encode_envelope``.

    Returns:
        The decoded Envelope.

    Raises:
        EnvelopeError: If text is not valid Base64 or decodes to fewer
            bytes than the minimum envelope size.
    """
    try:
        data = base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as err:
        raise EnvelopeError("Invalid Base64 encoded input", err) from err
    if len(data) < MIN_ENVELOPE_SIZE:
        raise EnvelopeError(
            f"Invalid encrypted data: too short ({len(data)} bytes, "
            f"minimum {MIN_ENVELOPE_SIZE})"
        )
    nonce_end = SALT_SIZE + NONCE_SIZE
    return Envelope(
        salt=data[:SALT_SIZE],
        nonce=data[SALT_SIZE:nonce_end],
        ciphertext=data[nonce_end:-TAG_SIZE],
        tag=data[-TAG_SIZE:],
    )
