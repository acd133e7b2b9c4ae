"""
Account tests.
"""

import pytest

from algorand_client.accounts import Account, Address, mnemonic_from_seed, verify_address_signature
from algorand_client.crypto.ed25519 import Ed25519Error
from algorand_client.runtime.errors import InvalidChecksumError

from helpers.golden import MNEMONIC_ADDRESS


class TestAccountConstruction:
    """Test the ways of obtaining an account."""

    def test_from_mnemonic(self, account):
        """Test the golden phrase yields the golden address."""
        assert account.address == Address.from_string(MNEMONIC_ADDRESS)
        assert account.address.to_bytes() == account.public_key

    def test_from_key_matches_mnemonic(self, account, mnemonic_phrase):
        """Test from_key and from_mnemonic agree."""
        from algorand_client.accounts import seed_from_mnemonic

        assert Account.from_key(seed_from_mnemonic(mnemonic_phrase)) == account

    def test_generate_is_random(self):
        """Test generated accounts differ."""
        assert Account.generate().address != Account.generate().address

    def test_from_key_wrong_length(self):
        """Test a seed that is not 32 bytes."""
        with pytest.raises(Ed25519Error):
            Account.from_key(bytes(31))

    def test_from_mnemonic_bad_checksum(self):
        """Test errors from the phrase propagate."""
        phrase = mnemonic_from_seed(bytes(32)).rsplit(" ", 1)[0] + " abandon"

        with pytest.raises(InvalidChecksumError):
            Account.from_mnemonic(phrase)

    def test_repr_hides_secret(self, account):
        """Test the repr carries only the address."""
        assert repr(account) == f"Account(address='{MNEMONIC_ADDRESS}')"


class TestAccountSigning:
    """Test signing and verification."""

    def test_sign_and_verify(self, random_account):
        """Test a signature verifies against the account address."""
        signature = random_account.sign(b"hello")

        assert len(signature) == 64
        assert random_account.verify(b"hello", signature)
        assert verify_address_signature(random_account.address, b"hello", signature)

    def test_signatures_are_deterministic(self, account):
        """Test Ed25519 signing is deterministic."""
        assert account.sign(b"message") == account.sign(b"message")

    def test_tampered_message(self, random_account):
        """Test a signature does not verify another message."""
        signature = random_account.sign(b"hello")

        assert not random_account.verify(b"hellp", signature)

    def test_other_account(self, random_account):
        """Test a signature does not verify for another address."""
        signature = random_account.sign(b"hello")

        assert not verify_address_signature(Account.generate().address, b"hello", signature)

    def test_equality_and_hash(self, account, mnemonic_phrase):
        """Test accounts compare by address."""
        other = Account.from_mnemonic(mnemonic_phrase)

        assert account == other
        assert hash(account) == hash(other)
        assert account != Account.generate()
