"""
Text encodings used on the Algorand wire.

- base32: RFC 4648 alphabet, no padding (addresses, transaction ids)
- base64: standard alphabet with padding (genesis hashes, participation keys)
"""

import base64
import binascii
from typing import Union

from ..runtime.errors import EncodingError, ErrorCode


def base32_encode(data: bytes) -> str:
    """Encode bytes as unpadded RFC 4648 base32."""
    return base64.b32encode(bytes(data)).decode("ascii").rstrip("=")


def base32_decode(text: str) -> bytes:
    """
    Decode unpadded RFC 4648 base32.

    Raises:
        EncodingError: If text is not valid base32
    """
    if not isinstance(text, str):
        raise EncodingError(f"base32 input must be str, got {type(text).__name__}",
                            ErrorCode.INVALID_BASE32)
    padded = text + "=" * (-len(text) % 8)
    try:
        return base64.b32decode(padded)
    except (binascii.Error, ValueError) as e:
        raise EncodingError(f"Invalid base32 text: {text!r}", ErrorCode.INVALID_BASE32, cause=e)


def base64_encode(data: bytes) -> str:
    """Encode bytes as standard padded base64."""
    return base64.b64encode(bytes(data)).decode("ascii")


def base64_decode(text: Union[str, bytes]) -> bytes:
    """
    Decode standard padded base64.

    Raises:
        EncodingError: If text is not valid base64
    """
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError, TypeError) as e:
        raise EncodingError(f"Invalid base64 text: {text!r}", ErrorCode.INVALID_BASE64, cause=e)


__all__ = [
    "base32_encode",
    "base32_decode",
    "base64_encode",
    "base64_decode",
]
