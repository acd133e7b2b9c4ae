"""
Truncated-hash checksums.

Addresses carry the last 4 bytes of SHA-512/256(public key); mnemonic
phrases derive their checksum word from the first 2 bytes of
SHA-512/256(seed). Both truncation points are protocol constants.
"""

from typing import Tuple

from .hashes import sha512_256

CHECKSUM_BYTES_LENGTH = 4


def checksum(payload: bytes, size: int = CHECKSUM_BYTES_LENGTH) -> bytes:
    """Return the last ``size`` bytes of SHA-512/256(payload)."""
    if size <= 0:
        raise ValueError(f"checksum size must be positive, got {size}")
    return sha512_256(payload)[-size:]


def digest_prefix(payload: bytes, size: int) -> bytes:
    """Return the first ``size`` bytes of SHA-512/256(payload)."""
    return sha512_256(payload)[:size]


def append_checksum(payload: bytes) -> bytes:
    """Append the 4-byte checksum to payload."""
    return bytes(payload) + checksum(payload)


def split_checksum(data: bytes, payload_size: int) -> Tuple[bytes, bytes]:
    """
    Split checksummed data into payload and trailing checksum.

    Args:
        data: Payload followed by its checksum
        payload_size: Number of leading payload bytes

    Returns:
        (payload, checksum) tuple
    """
    return bytes(data[:payload_size]), bytes(data[payload_size:])


def verify_checksum(payload: bytes, expected: bytes) -> bool:
    """
    Check a checksum against its payload.

    Addresses are public data, so a plain comparison is sufficient.
    """
    if len(expected) != CHECKSUM_BYTES_LENGTH:
        return False
    return checksum(payload) == bytes(expected)


__all__ = [
    "CHECKSUM_BYTES_LENGTH",
    "checksum",
    "digest_prefix",
    "append_checksum",
    "split_checksum",
    "verify_checksum",
]
