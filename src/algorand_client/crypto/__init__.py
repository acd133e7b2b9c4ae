"""
Cryptographic primitives for the Algorand protocol.

Provides Ed25519 signing, SHA-512/256 hashing and the truncated-hash
checksums used by addresses and mnemonic phrases.
"""

from .ed25519 import (
    Ed25519PublicKey, Ed25519PrivateKey, Ed25519Error, verify_ed25519
)
from .hashes import sha512_256
from .checksum import checksum, digest_prefix, append_checksum, split_checksum, verify_checksum

__all__ = [
    "Ed25519PublicKey",
    "Ed25519PrivateKey",
    "Ed25519Error",
    "verify_ed25519",
    "sha512_256",
    "checksum",
    "digest_prefix",
    "append_checksum",
    "split_checksum",
    "verify_checksum",
]
