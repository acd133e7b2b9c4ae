"""
Account identities for the Algorand protocol: addresses, mnemonic
phrases and signing accounts.
"""

from .address import (
    ADDRESS_BYTES_LENGTH, Address, decode_address, encode_address, is_valid_address
)
from .mnemonic import (
    MNEMONIC_WORD_COUNT, SEED_BYTES_LENGTH, mnemonic_from_seed, seed_from_mnemonic
)
from .account import Account, verify_address_signature

__all__ = [
    "ADDRESS_BYTES_LENGTH",
    "Address",
    "decode_address",
    "encode_address",
    "is_valid_address",
    "MNEMONIC_WORD_COUNT",
    "SEED_BYTES_LENGTH",
    "mnemonic_from_seed",
    "seed_from_mnemonic",
    "Account",
    "verify_address_signature",
]
