"""
Base transaction input for the Algorand protocol.

A TransactionInput holds the user-facing fields of one transaction type
(addresses as text, keys and genesis hash as base64 text). Building it
validates and decodes those fields, assembles the matching transaction
variant and resolves its fee.
"""

from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel, Field

from ...accounts.address import Address
from ...codec.encoding import base64_decode
from ...crypto.hashes import DIGEST_BYTE_LENGTH
from ...runtime.errors import BuilderError, EncodingError, GenesisHashError
from ..fees import FeeParams, resolve_fee
from ..types import (
    AssetConfigParams,
    KeyRegParams,
    MicroAlgos,
    PaymentParams,
    Round,
    TRANSACTION_CLASSES,
    TransactionHeader,
    TxType,
)

logger = logging.getLogger(__name__)


class TransactionInput(BaseModel, ABC):
    """
    Base class for all transaction inputs.

    Every subclass implements each build_*_params method, returning None
    for the parameter blocks that do not belong to its transaction type.
    """

    sender: str = Field(alias="from")
    # Flat fee, or fee per byte when is_flat_fee is False
    fee: MicroAlgos
    first_round: Round
    last_round: Round
    note: Optional[bytes] = None
    genesis_id: str = ""
    # Base64 text of the 32-byte genesis hash
    genesis_hash: str
    is_flat_fee: bool = False

    model_config = {"populate_by_name": True, "frozen": True}

    @property
    @abstractmethod
    def tx_type(self) -> TxType:
        """Get the transaction type built by this input."""
        pass

    def build_header(self) -> TransactionHeader:
        """
        Build the header shared by every transaction type.

        Raises:
            GenesisHashError: If the genesis hash is empty, not base64 or not 32 bytes
            AddressError: If the sender is not a valid address
        """
        return TransactionHeader(
            sender=Address.from_string(self.sender),
            fee=self.fee,
            first_valid=self.first_round,
            last_valid=self.last_round,
            note=self.note or None,
            genesis_id=self.genesis_id,
            genesis_hash=decode_genesis_hash(self.genesis_hash),
        )

    @abstractmethod
    def build_payment_params(self) -> Optional[PaymentParams]:
        pass

    @abstractmethod
    def build_key_reg_params(self) -> Optional[KeyRegParams]:
        pass

    @abstractmethod
    def build_asset_config_params(self) -> Optional[AssetConfigParams]:
        pass

    def modify_final_transaction(self, txn, fee_params: Optional[FeeParams] = None):
        """
        Apply the final touches to an assembled transaction.

        The default resolves the fee from this input's fee and is_flat_fee.
        """
        return resolve_fee(txn, self.fee, self.is_flat_fee, fee_params)

    def build(self, fee_params: Optional[FeeParams] = None):
        """Build the transaction described by this input."""
        return build_transaction(self, fee_params)


def decode_genesis_hash(genesis_hash: str) -> bytes:
    """
    Decode a base64 genesis hash.

    Raises:
        GenesisHashError: If the hash is empty, not base64 or not 32 bytes
    """
    if not genesis_hash:
        raise GenesisHashError("Genesis hash required")

    try:
        digest = base64_decode(genesis_hash)
    except EncodingError as e:
        raise GenesisHashError(f"Genesis hash is not valid base64: {e.message}", cause=e)

    if len(digest) != DIGEST_BYTE_LENGTH:
        raise GenesisHashError(
            f"Expected genesis hash to be {DIGEST_BYTE_LENGTH} bytes but got {len(digest)}",
            details={"expected": DIGEST_BYTE_LENGTH, "actual": len(digest)},
        )
    return digest


def build_transaction(tx_input: TransactionInput, fee_params: Optional[FeeParams] = None):
    """
    Assemble and finalize the transaction described by an input.

    Args:
        tx_input: Transaction input
        fee_params: Fee parameters (uses defaults if None)

    Returns:
        Transaction variant matching tx_input.tx_type, with its fee resolved

    Raises:
        BuilderError: If the input does not produce exactly one parameter
            block matching its transaction type
    """
    header = tx_input.build_header()

    produced = {
        tx_type: params
        for tx_type, params in (
            (TxType.PAYMENT, tx_input.build_payment_params()),
            (TxType.KEY_REG, tx_input.build_key_reg_params()),
            (TxType.ASSET_CONFIG, tx_input.build_asset_config_params()),
        )
        if params is not None
    }

    expected = tx_input.tx_type
    if list(produced) != [expected]:
        raise BuilderError(
            f"{type(tx_input).__name__} must produce exactly one {expected.value} parameter block",
            details={"produced": [t.value for t in produced]},
        )

    txn = TRANSACTION_CLASSES[expected](header=header, params=produced[expected])
    txn = tx_input.modify_final_transaction(txn, fee_params)
    logger.debug("Built %s transaction with fee %d", expected.value, txn.fee)
    return txn


__all__ = [
    "TransactionInput",
    "decode_genesis_hash",
    "build_transaction",
]
