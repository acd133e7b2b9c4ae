"""
Signing accounts.

An Account holds an Ed25519 private key together with its public key
and Address. Only an Account can sign; to merely identify or verify a
party use its Address.
"""

from __future__ import annotations

from ..crypto.ed25519 import Ed25519PrivateKey, verify_ed25519
from .address import Address
from .mnemonic import seed_from_mnemonic


class Account:
    """
    An account used for signing transactions.

    Represents the fully formed account containing both the private key
    and the derived public key / address.
    """

    def __init__(self, private_key: Ed25519PrivateKey):
        """
        Initialize from a private key.

        Args:
            private_key: Ed25519 key owning the account
        """
        self._private_key = private_key
        self._address = Address.from_bytes(private_key.public_key().to_bytes())

    @classmethod
    def generate(cls) -> Account:
        """
        Generate a random account.

        If you already have seed bytes use from_key(); for a mnemonic
        phrase use from_mnemonic().
        """
        return cls(Ed25519PrivateKey.generate())

    @classmethod
    def from_key(cls, seed: bytes) -> Account:
        """
        Create an account from a 32-byte private key seed.

        Raises:
            Ed25519Error: If seed is not exactly 32 bytes
        """
        return cls(Ed25519PrivateKey.from_bytes(seed))

    @classmethod
    def from_mnemonic(cls, phrase: str) -> Account:
        """
        Create an account from a 25-word mnemonic phrase.

        Raises:
            MnemonicError: If the phrase is malformed or its checksum is wrong
        """
        return cls.from_key(seed_from_mnemonic(phrase))

    @property
    def address(self) -> Address:
        """The account address."""
        return self._address

    @property
    def public_key(self) -> bytes:
        """The 32-byte Ed25519 public key."""
        return self._private_key.public_key().to_bytes()

    def sign(self, message: bytes) -> bytes:
        """
        Sign arbitrary bytes.

        Returns:
            64-byte Ed25519 signature
        """
        return self._private_key.sign(message)

    def verify(self, message: bytes, signature: bytes) -> bool:
        """Verify a signature made by this account."""
        return verify_address_signature(self._address, message, signature)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Account):
            return False
        return self._address == other._address

    def __hash__(self) -> int:
        return hash(self._address)

    def __repr__(self) -> str:
        return f"Account(address='{self._address}')"


def verify_address_signature(address: Address, message: bytes, signature: bytes) -> bool:
    """
    Verify that signature over message was made by the owner of address.

    Args:
        address: Signer address (its bytes are the Ed25519 public key)
        message: Signed bytes
        signature: 64-byte Ed25519 signature

    Returns:
        True if the signature is valid
    """
    return verify_ed25519(address.to_bytes(), signature, message)


__all__ = [
    "Account",
    "verify_address_signature",
]
