"""
Ed25519 keys for Algorand accounts.

An account key is a 32-byte seed. Its 32-byte public key is the payload
of the account address, and the seed is what a mnemonic phrase encodes.

Two backends are supported, ``cryptography`` and PyNaCl. Keys use
DEFAULT_BACKEND unless one is named; both produce identical keys and
signatures.
"""

from __future__ import annotations
from typing import Optional

try:
    from cryptography.exceptions import InvalidSignature
    from cryptography.hazmat.primitives.asymmetric import ed25519 as _ed25519
    from cryptography.hazmat.primitives.serialization import (
        Encoding, NoEncryption, PrivateFormat, PublicFormat
    )
    HAS_CRYPTOGRAPHY = True
except ImportError:
    HAS_CRYPTOGRAPHY = False

try:
    import nacl.exceptions
    import nacl.signing
    HAS_NACL = True
except ImportError:
    HAS_NACL = False

from ..runtime.errors import InvalidKeyError

PUBLIC_KEY_LENGTH = 32
SEED_LENGTH = 32
SIGNATURE_LENGTH = 64

CRYPTOGRAPHY = "cryptography"
PYNACL = "pynacl"

AVAILABLE_BACKENDS = tuple(
    name for name, present in ((CRYPTOGRAPHY, HAS_CRYPTOGRAPHY), (PYNACL, HAS_NACL)) if present
)
DEFAULT_BACKEND: Optional[str] = AVAILABLE_BACKENDS[0] if AVAILABLE_BACKENDS else None


class Ed25519Error(InvalidKeyError):
    """Ed25519 key material is unusable."""


def _resolve_backend(backend: Optional[str]) -> str:
    name = backend or DEFAULT_BACKEND
    if name not in AVAILABLE_BACKENDS:
        raise Ed25519Error(
            f"Ed25519 backend not available: {name}",
            {"backend": name, "available": list(AVAILABLE_BACKENDS)},
        )
    return name


def _exact_bytes(kind: str, data: bytes, expected: int) -> bytes:
    actual = len(data) if isinstance(data, (bytes, bytearray, memoryview)) else None
    if actual != expected:
        raise Ed25519Error(
            f"Ed25519 {kind} must be {expected} bytes, got {actual}",
            {"expected": expected, "actual": actual},
        )
    return bytes(data)


class Ed25519PublicKey:
    """Verifying half of an account key."""

    def __init__(self, key_bytes: bytes, backend: Optional[str] = None):
        """
        Raises:
            Ed25519Error: If key_bytes is not a 32-byte Ed25519 point or
                the backend is not installed
        """
        self._raw = _exact_bytes("public key", key_bytes, PUBLIC_KEY_LENGTH)
        self.backend = _resolve_backend(backend)
        try:
            if self.backend == CRYPTOGRAPHY:
                self._verifier = _ed25519.Ed25519PublicKey.from_public_bytes(self._raw)
            else:
                self._verifier = nacl.signing.VerifyKey(self._raw)
        except ValueError as e:
            raise Ed25519Error(f"Invalid Ed25519 public key: {e}", cause=e)

    @classmethod
    def from_bytes(cls, key_bytes: bytes, backend: Optional[str] = None) -> Ed25519PublicKey:
        return cls(key_bytes, backend)

    def to_bytes(self) -> bytes:
        return self._raw

    def verify(self, signature: bytes, message: bytes) -> bool:
        """
        Check a signature over message.

        Returns:
            True if signature is a valid 64-byte signature by this key
        """
        if len(signature) != SIGNATURE_LENGTH:
            return False
        if self.backend == CRYPTOGRAPHY:
            try:
                self._verifier.verify(bytes(signature), bytes(message))
            except InvalidSignature:
                return False
            return True
        try:
            self._verifier.verify(bytes(message), bytes(signature))
        except nacl.exceptions.BadSignatureError:
            return False
        return True

    def __eq__(self, other) -> bool:
        return isinstance(other, Ed25519PublicKey) and self._raw == other._raw

    def __hash__(self) -> int:
        return hash(self._raw)

    def __repr__(self) -> str:
        return f"Ed25519PublicKey('{self._raw.hex()}')"


class Ed25519PrivateKey:
    """
    Signing half of an account key, held as its 32-byte seed.

    The public key is derived once at construction.
    """

    def __init__(self, seed: bytes, backend: Optional[str] = None):
        """
        Raises:
            Ed25519Error: If seed is not 32 bytes or the backend is not installed
        """
        self._seed = _exact_bytes("seed", seed, SEED_LENGTH)
        self.backend = _resolve_backend(backend)
        if self.backend == CRYPTOGRAPHY:
            self._signer = _ed25519.Ed25519PrivateKey.from_private_bytes(self._seed)
            public_raw = self._signer.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw)
        else:
            self._signer = nacl.signing.SigningKey(self._seed)
            public_raw = bytes(self._signer.verify_key)
        self._public_key = Ed25519PublicKey(public_raw, self.backend)

    @classmethod
    def generate(cls, backend: Optional[str] = None) -> Ed25519PrivateKey:
        """Create a key from a fresh seed drawn from the OS CSPRNG."""
        backend = _resolve_backend(backend)
        if backend == CRYPTOGRAPHY:
            seed = _ed25519.Ed25519PrivateKey.generate().private_bytes(
                Encoding.Raw, PrivateFormat.Raw, NoEncryption()
            )
        else:
            seed = bytes(nacl.signing.SigningKey.generate())
        return cls(seed, backend)

    @classmethod
    def from_bytes(cls, seed: bytes, backend: Optional[str] = None) -> Ed25519PrivateKey:
        return cls(seed, backend)

    def to_bytes(self) -> bytes:
        """Return the 32-byte seed."""
        return self._seed

    def public_key(self) -> Ed25519PublicKey:
        return self._public_key

    def sign(self, message: bytes) -> bytes:
        """Return the 64-byte signature of message."""
        if self.backend == CRYPTOGRAPHY:
            return self._signer.sign(bytes(message))
        return self._signer.sign(bytes(message)).signature

    def __repr__(self) -> str:
        # The seed is secret; show the public key only
        return f"Ed25519PrivateKey(public='{self._public_key.to_bytes().hex()}')"


def verify_ed25519(public_key_bytes: bytes, signature: bytes, message: bytes) -> bool:
    """Verify a signature against raw public key bytes; malformed keys never verify."""
    try:
        public_key = Ed25519PublicKey(public_key_bytes)
    except Ed25519Error:
        return False
    return public_key.verify(signature, message)


__all__ = [
    "PUBLIC_KEY_LENGTH",
    "SEED_LENGTH",
    "SIGNATURE_LENGTH",
    "CRYPTOGRAPHY",
    "PYNACL",
    "AVAILABLE_BACKENDS",
    "DEFAULT_BACKEND",
    "Ed25519Error",
    "Ed25519PublicKey",
    "Ed25519PrivateKey",
    "verify_ed25519",
]
