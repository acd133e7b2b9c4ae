"""
Address Pydantic custom type for Algorand accounts.

An address is the 32-byte Ed25519 public key. Its human-readable form is
base32(public_key + checksum) without padding, where checksum is the last
4 bytes of SHA-512/256(public_key), giving a 58 character string.
"""

from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema

from ..codec.encoding import base32_decode, base32_encode
from ..crypto.checksum import CHECKSUM_BYTES_LENGTH, append_checksum, split_checksum, verify_checksum
from ..runtime.errors import (
    AddressError,
    EncodingError,
    InvalidChecksumAddressError,
    WrongAddressByteLengthError,
    WrongAddressLengthError,
)

ADDRESS_BYTES_LENGTH = 32
ADDRESS_STRING_LENGTH = 58


class Address:
    """Immutable 32-byte account address."""

    __slots__ = ("_bytes",)

    def __init__(self, address_bytes: bytes):
        if not isinstance(address_bytes, (bytes, bytearray, memoryview)):
            raise WrongAddressByteLengthError(ADDRESS_BYTES_LENGTH, 0)
        if len(address_bytes) != ADDRESS_BYTES_LENGTH:
            raise WrongAddressByteLengthError(ADDRESS_BYTES_LENGTH, len(address_bytes))
        object.__setattr__(self, "_bytes", bytes(address_bytes))

    @classmethod
    def from_bytes(cls, address_bytes: bytes) -> "Address":
        """
        Create an Address from raw public key bytes.

        Raises:
            WrongAddressByteLengthError: If address_bytes is not 32 bytes long
        """
        return cls(address_bytes)

    @classmethod
    def from_string(cls, address: str) -> "Address":
        """
        Create an Address from its checksummed string form.

        Raises:
            InvalidChecksumAddressError: If the text is not canonical base32 or the checksum does not match
            WrongAddressLengthError: If the text does not decode to 36 bytes
        """
        try:
            address_with_checksum = base32_decode(address)
        except EncodingError as e:
            raise InvalidChecksumAddressError(str(address), cause=e)

        expected_length = ADDRESS_BYTES_LENGTH + CHECKSUM_BYTES_LENGTH
        if len(address_with_checksum) != expected_length:
            raise WrongAddressLengthError(expected_length, len(address_with_checksum))

        address_bytes, checksum_bytes = split_checksum(address_with_checksum, ADDRESS_BYTES_LENGTH)
        if not verify_checksum(address_bytes, checksum_bytes):
            raise InvalidChecksumAddressError(address)

        # The last character carries 2 unused bits; only the canonical form is accepted
        if base32_encode(address_with_checksum) != address:
            raise InvalidChecksumAddressError(address)

        return cls(address_bytes)

    def encode(self) -> str:
        """Get the checksummed, human-readable form of the address."""
        return base32_encode(append_checksum(self._bytes))

    def to_bytes(self) -> bytes:
        """Get the 32 raw address bytes."""
        return self._bytes

    def __bytes__(self) -> bytes:
        return self._bytes

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Address is immutable")

    def __reduce__(self):
        return (Address, (self._bytes,))

    def __str__(self) -> str:
        return self.encode()

    def __repr__(self) -> str:
        return f"Address('{self.encode()}')"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Address):
            return False
        return self._bytes == other._bytes

    def __hash__(self) -> int:
        return hash(self._bytes)

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> CoreSchema:
        """Return a Pydantic CoreSchema that validates the Address."""
        return core_schema.no_info_before_validator_function(
            cls._validate,
            core_schema.is_instance_schema(cls),
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )

    @classmethod
    def _validate(cls, value: Any) -> "Address":
        """Validate and convert the input to an Address."""
        if isinstance(value, cls):
            return value
        try:
            if isinstance(value, str):
                return cls.from_string(value)
            if isinstance(value, (bytes, bytearray)):
                return cls.from_bytes(value)
        except AddressError as e:
            raise ValueError(e.message) from e
        raise ValueError(f"Invalid Address: {value!r}")


def decode_address(address: str) -> Address:
    """Parse a checksummed address string."""
    return Address.from_string(address)


def encode_address(address_bytes: bytes) -> str:
    """Render 32 raw address bytes in checksummed string form."""
    return Address.from_bytes(address_bytes).encode()


def is_valid_address(address: str) -> bool:
    """Check whether a string is a well-formed, correctly checksummed address."""
    if not isinstance(address, str) or len(address) != ADDRESS_STRING_LENGTH:
        return False
    try:
        Address.from_string(address)
    except (InvalidChecksumAddressError, WrongAddressLengthError):
        return False
    return True


__all__ = [
    "ADDRESS_BYTES_LENGTH",
    "ADDRESS_STRING_LENGTH",
    "Address",
    "decode_address",
    "encode_address",
    "is_valid_address",
]
