"""
Hash utilities for the Algorand protocol.

Algorand hashes everything (address checksums, mnemonic checksums,
transaction ids) with SHA-512/256: SHA-512 with its own IV, truncated to
32 bytes. This is not the same as ``sha512(data)[:32]``.
"""

from cryptography.hazmat.primitives import hashes

DIGEST_BYTE_LENGTH = 32


def sha512_256(data: bytes) -> bytes:
    """
    Calculate the SHA-512/256 digest of data.

    Args:
        data: Data to hash

    Returns:
        32-byte digest

    Raises:
        ValueError: If data is not bytes
    """
    if not isinstance(data, (bytes, bytearray)):
        raise ValueError("data must be bytes")

    digest = hashes.Hash(hashes.SHA512_256())
    digest.update(bytes(data))
    return digest.finalize()


__all__ = [
    "DIGEST_BYTE_LENGTH",
    "sha512_256",
]
