"""
Shared fixtures for the Algorand SDK tests.

Golden vectors are signed with the account recovered from MNEMONIC.
"""

import pytest

from algorand_client.accounts import Account

from helpers.golden import (
    DEVNET_GENESIS_HASH,
    MNEMONIC,
    MNEMONIC_ADDRESS,
    PARTICIPANT_ADDRESS,
    RECEIVER_ADDRESS,
    TESTNET_GENESIS_HASH,
)


@pytest.fixture
def mnemonic_phrase():
    """The 25-word phrase behind the golden vectors."""
    return MNEMONIC


@pytest.fixture
def account():
    """Account recovered from the golden mnemonic."""
    return Account.from_mnemonic(MNEMONIC)


@pytest.fixture
def random_account():
    """Freshly generated account."""
    return Account.generate()


@pytest.fixture
def payment_fields():
    """Fields of a per-byte fee payment on devnet."""
    return {
        "from": MNEMONIC_ADDRESS,
        "to": RECEIVER_ADDRESS,
        "fee": 4,
        "amount": 1000,
        "first_round": 12466,
        "last_round": 13466,
        "genesis_id": "devnet-v33.0",
        "genesis_hash": DEVNET_GENESIS_HASH,
    }


@pytest.fixture
def key_reg_fields():
    """Fields of a flat fee key registration on testnet."""
    return {
        "from": PARTICIPANT_ADDRESS,
        "fee": 10,
        "first_round": 322575,
        "last_round": 323575,
        "genesis_hash": TESTNET_GENESIS_HASH,
        "vote_pk": "Kv7QI7chi1y6axoy+t7wzAVpePqRq/rkjzWh/RMYyLo=",
        "selection_pk": "bPgrv4YogPcdaUAxrt1QysYZTVyRAuUMD4zQmCu9llc=",
        "vote_first": 10000,
        "vote_last": 10111,
        "vote_key_dilution": 11,
        "is_flat_fee": True,
    }


@pytest.fixture
def asset_config_fields():
    """Fields of an asset re-configuration on testnet."""
    return {
        "from": MNEMONIC_ADDRESS,
        "fee": 10,
        "first_round": 322575,
        "last_round": 323575,
        "genesis_hash": TESTNET_GENESIS_HASH,
        "creator": PARTICIPANT_ADDRESS,
        "index": 1234,
        "manager": PARTICIPANT_ADDRESS,
        "reserve": PARTICIPANT_ADDRESS,
        "freeze": PARTICIPANT_ADDRESS,
        "clawback": PARTICIPANT_ADDRESS,
    }
