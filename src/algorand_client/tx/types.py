"""
Transaction types for the Algorand protocol.

A transaction is one of three frozen variants sharing a common header:

    PaymentTransaction      type "pay"     PaymentParams
    KeyRegTransaction       type "keyreg"  KeyRegParams
    AssetConfigTransaction  type "acfg"    AssetConfigParams

``Transaction`` is the discriminated union of the three, keyed on
``tx_type``, so a transaction always carries exactly one parameter block.
"""

from __future__ import annotations
from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field

from ..accounts.address import Address
from ..runtime.errors import UnknownTransactionTypeError

MAX_UINT64 = 2 ** 64 - 1

MicroAlgos = Annotated[int, Field(ge=0, le=MAX_UINT64)]
Round = Annotated[int, Field(ge=0, le=MAX_UINT64)]
Uint64 = Annotated[int, Field(ge=0, le=MAX_UINT64)]
Digest = Annotated[bytes, Field(min_length=32, max_length=32)]
PublicKeyBytes = Annotated[bytes, Field(min_length=32, max_length=32)]


class TxType(str, Enum):
    """Identifies the type of the transaction."""

    # Payment transactions
    PAYMENT = "pay"
    # Key registrations
    KEY_REG = "keyreg"
    # Creates, re-configures or destroys an asset
    ASSET_CONFIG = "acfg"

    @classmethod
    def from_str(cls, tx_type: str) -> TxType:
        """
        Parse the wire tag of a transaction type.

        Raises:
            UnknownTransactionTypeError: If tx_type is not a supported tag
        """
        try:
            return cls(tx_type)
        except ValueError:
            raise UnknownTransactionTypeError(tx_type) from None

    def __str__(self) -> str:
        return self.value


class TransactionHeader(BaseModel):
    """Fields common to every transaction type."""

    sender: Address
    fee: MicroAlgos = 0
    first_valid: Round = 0
    last_valid: Round = 0
    note: Optional[bytes] = None
    genesis_id: str = ""
    genesis_hash: Digest
    # Hash of the TxGroup this transaction belongs to, if any
    group: Optional[Digest] = None

    model_config = {"frozen": True}


class PaymentParams(BaseModel):
    """Fields used by payment transactions."""

    receiver: Address
    amount: MicroAlgos = 0
    # When set, the sender account is closed and its remaining funds
    # are transferred to this address.
    close_remainder_to: Optional[Address] = None

    model_config = {"frozen": True}


class KeyRegParams(BaseModel):
    """Fields used by key registration transactions."""

    vote_pk: PublicKeyBytes
    selection_pk: PublicKeyBytes
    vote_first: Round = 0
    vote_last: Round = 0
    vote_key_dilution: Uint64 = 0

    model_config = {"frozen": True}


class AssetID(BaseModel):
    """Names an asset by its creator and index."""

    creator: Address
    index: Uint64 = 0

    model_config = {"frozen": True}


class AssetParams(BaseModel):
    """
    Parameters of an asset being created or re-configured.

    Every field is optional; unset fields are omitted from the wire record.
    """

    # Hint for the name of the asset
    asset_name: Optional[bytes] = None
    # Hint for the name of a unit of the asset
    unit_name: Optional[bytes] = None
    # Total number of units created
    total: Optional[Uint64] = None
    # Whether holdings of this asset are frozen by default
    default_frozen: Optional[bool] = None
    # Account allowed to change the non-zero addresses in these params
    manager: Optional[Address] = None
    # Account whose holdings are reported as "not minted"
    reserve: Optional[Address] = None
    # Account allowed to change the frozen state of holdings
    freeze: Optional[Address] = None
    # Account allowed to take units of this asset from any account
    clawback: Optional[Address] = None

    model_config = {"frozen": True}


class AssetConfigParams(BaseModel):
    """Fields used for asset allocation, re-configuration and destruction."""

    asset_id: AssetID
    asset_params: Optional[AssetParams] = None

    model_config = {"frozen": True}


class BaseTransaction(BaseModel):
    """Shared behaviour of the transaction variants."""

    header: TransactionHeader

    model_config = {"frozen": True}

    def with_fee(self, fee: int):
        """Return a copy of this transaction with the header fee replaced."""
        if not 0 <= fee <= MAX_UINT64:
            raise ValueError(f"fee out of range: {fee}")
        header = self.header.model_copy(update={"fee": fee})
        return self.model_copy(update={"header": header})

    @property
    def sender(self) -> Address:
        return self.header.sender

    @property
    def fee(self) -> int:
        return self.header.fee


class PaymentTransaction(BaseTransaction):
    """Moves MicroAlgos from the sender to a receiver."""

    tx_type: Literal[TxType.PAYMENT] = TxType.PAYMENT
    params: PaymentParams


class KeyRegTransaction(BaseTransaction):
    """Registers participation keys for the sender."""

    tx_type: Literal[TxType.KEY_REG] = TxType.KEY_REG
    params: KeyRegParams


class AssetConfigTransaction(BaseTransaction):
    """Creates, re-configures or destroys an asset."""

    tx_type: Literal[TxType.ASSET_CONFIG] = TxType.ASSET_CONFIG
    params: AssetConfigParams


Transaction = Annotated[
    Union[PaymentTransaction, KeyRegTransaction, AssetConfigTransaction],
    Field(discriminator="tx_type"),
]

TRANSACTION_CLASSES = {
    TxType.PAYMENT: PaymentTransaction,
    TxType.KEY_REG: KeyRegTransaction,
    TxType.ASSET_CONFIG: AssetConfigTransaction,
}


class MultisigSubsig(BaseModel):
    """One participant of a multisignature: public key and optional signature."""

    key: PublicKeyBytes
    signature: Optional[bytes] = None

    model_config = {"frozen": True}


class MultisigSig(BaseModel):
    """Multisignature envelope: subsignatures, threshold and version."""

    subsigs: tuple[MultisigSubsig, ...] = ()
    threshold: int = Field(default=0, ge=0, le=255)
    version: int = Field(default=0, ge=0, le=255)

    model_config = {"frozen": True}


__all__ = [
    "MAX_UINT64",
    "TxType",
    "TransactionHeader",
    "PaymentParams",
    "KeyRegParams",
    "AssetID",
    "AssetParams",
    "AssetConfigParams",
    "BaseTransaction",
    "PaymentTransaction",
    "KeyRegTransaction",
    "AssetConfigTransaction",
    "Transaction",
    "TRANSACTION_CLASSES",
    "MultisigSubsig",
    "MultisigSig",
]
