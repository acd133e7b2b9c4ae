"""
Address encoding tests.

Covers the checksummed base32 form, its failure modes and the pydantic
integration used by the transaction models.
"""

import copy
import pickle

import pytest
from pydantic import BaseModel, ValidationError

from algorand_client.accounts.address import (
    ADDRESS_STRING_LENGTH,
    Address,
    decode_address,
    encode_address,
    is_valid_address,
)
from algorand_client.runtime.errors import (
    AddressError,
    ErrorCode,
    InvalidChecksumAddressError,
    WrongAddressByteLengthError,
    WrongAddressLengthError,
)

from helpers.golden import MNEMONIC_ADDRESS, RECEIVER_ADDRESS

ALL_ONES_ADDRESS = "7777777777777777777777777777777777777777777777777774MSJUVU"
BASE32_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"


class TestAddressEncoding:
    """Test the checksummed string form."""

    def test_all_ones_golden(self):
        """Test the known encoding of 32 0xFF bytes."""
        address = Address(b"\xff" * 32)

        assert address.encode() == ALL_ONES_ADDRESS
        assert len(address.encode()) == ADDRESS_STRING_LENGTH

    def test_decode_recovers_bytes(self):
        """Test decoding returns the original bytes."""
        assert decode_address(ALL_ONES_ADDRESS).to_bytes() == b"\xff" * 32

    def test_roundtrip_known_address(self):
        """Test a real address survives decode and re-encode."""
        assert decode_address(MNEMONIC_ADDRESS).encode() == MNEMONIC_ADDRESS

    def test_encode_address_helper(self):
        """Test the module-level encoder."""
        assert encode_address(b"\xff" * 32) == ALL_ONES_ADDRESS

    def test_str_and_bytes(self):
        """Test the dunder conversions."""
        address = Address.from_string(RECEIVER_ADDRESS)

        assert str(address) == RECEIVER_ADDRESS
        assert bytes(address) == address.to_bytes()
        assert RECEIVER_ADDRESS in repr(address)


class TestAddressErrors:
    """Test rejection of malformed addresses."""

    def test_wrong_checksum(self):
        """Test a flipped checksum character is rejected."""
        tampered = ALL_ONES_ADDRESS[:-1] + ("A" if ALL_ONES_ADDRESS[-1] != "A" else "B")

        with pytest.raises(InvalidChecksumAddressError) as exc_info:
            Address.from_string(tampered)

        assert exc_info.value.code == ErrorCode.INVALID_CHECKSUM_ADDRESS
        assert exc_info.value.address == tampered

    def test_wrong_payload(self):
        """Test a modified payload no longer matches its checksum."""
        tampered = "A" + MNEMONIC_ADDRESS[1:]

        with pytest.raises(InvalidChecksumAddressError):
            Address.from_string(tampered)

    def test_non_canonical_last_character(self):
        """Test a last character differing only in the unused bits."""
        # U and X share the 3 bits that land in the final byte
        tampered = MNEMONIC_ADDRESS[:-1] + "X"

        with pytest.raises(InvalidChecksumAddressError) as exc_info:
            Address.from_string(tampered)

        assert exc_info.value.address == tampered
        assert not is_valid_address(tampered)

    @pytest.mark.parametrize("address", [MNEMONIC_ADDRESS, RECEIVER_ADDRESS, ALL_ONES_ADDRESS])
    def test_every_single_character_change_rejected(self, address):
        """Test substituting any one character with any other base32 letter."""
        accepted = []
        for position, original in enumerate(address):
            for letter in BASE32_ALPHABET.replace(original, ""):
                tampered = address[:position] + letter + address[position + 1:]
                try:
                    Address.from_string(tampered)
                except AddressError:
                    continue
                accepted.append(tampered)

        assert accepted == []

    def test_invalid_base32(self):
        """Test characters outside the base32 alphabet."""
        with pytest.raises(InvalidChecksumAddressError) as exc_info:
            Address.from_string("0" * ADDRESS_STRING_LENGTH)

        assert exc_info.value.cause is not None

    def test_wrong_length(self):
        """Test valid base32 that does not decode to 36 bytes."""
        with pytest.raises(WrongAddressLengthError) as exc_info:
            Address.from_string("AAAAAAAA")

        assert exc_info.value.details["expected"] == 36
        assert exc_info.value.details["actual"] == 5

    def test_wrong_byte_length(self):
        """Test raw bytes that are not 32 long."""
        with pytest.raises(WrongAddressByteLengthError):
            Address(b"\x00" * 31)

    def test_errors_share_family(self):
        """Test every address error is an AddressError."""
        with pytest.raises(AddressError):
            Address.from_string("AAAAAAAA")

    @pytest.mark.parametrize("value,expected", [
        (MNEMONIC_ADDRESS, True),
        (ALL_ONES_ADDRESS, True),
        (MNEMONIC_ADDRESS[:-1], False),
        ("A" + MNEMONIC_ADDRESS[1:], False),
        ("", False),
        (None, False),
    ])
    def test_is_valid_address(self, value, expected):
        """Test the boolean validity check."""
        assert is_valid_address(value) is expected


class TestAddressValueSemantics:
    """Test equality, hashing and immutability."""

    def test_equality_and_hash(self):
        """Test equal addresses compare and hash alike."""
        a = Address.from_string(MNEMONIC_ADDRESS)
        b = Address(a.to_bytes())

        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_never_equal_to_string(self):
        """Test an Address does not compare equal to its string form."""
        address = Address.from_string(MNEMONIC_ADDRESS)

        assert address != MNEMONIC_ADDRESS
        assert MNEMONIC_ADDRESS not in {address}

    def test_immutable(self):
        """Test attributes cannot be reassigned."""
        address = Address.from_string(MNEMONIC_ADDRESS)

        with pytest.raises(AttributeError):
            address._bytes = b"\x00" * 32

    def test_copy_and_pickle(self):
        """Test copies stay equal."""
        address = Address.from_string(MNEMONIC_ADDRESS)

        assert copy.deepcopy(address) == address
        assert pickle.loads(pickle.dumps(address)) == address


class TestAddressPydantic:
    """Test Address as a pydantic field type."""

    class Holder(BaseModel):
        address: Address

    def test_accepts_string(self):
        """Test a string is parsed into an Address."""
        holder = self.Holder(address=MNEMONIC_ADDRESS)

        assert isinstance(holder.address, Address)
        assert holder.address.encode() == MNEMONIC_ADDRESS

    def test_accepts_bytes(self):
        """Test raw bytes are accepted."""
        holder = self.Holder(address=b"\xff" * 32)

        assert holder.address.encode() == ALL_ONES_ADDRESS

    def test_rejects_garbage(self):
        """Test an invalid string fails validation."""
        with pytest.raises(ValidationError):
            self.Holder(address="not an address")

    def test_serializes_as_string(self):
        """Test model_dump renders the checksummed form."""
        holder = self.Holder(address=MNEMONIC_ADDRESS)

        assert holder.model_dump() == {"address": MNEMONIC_ADDRESS}
