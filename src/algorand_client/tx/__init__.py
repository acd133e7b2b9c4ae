"""
Transaction infrastructure for the Algorand protocol.

Provides:
- types.py: frozen transaction models (pay, keyreg, acfg)
- codec.py: canonical wire records and their encoding
- signing.py: domain-tagged signing, transaction ids, signed envelopes
- fees.py: flat and per-byte fee resolution
- builders/: validated transaction inputs and the builder registry
"""

from .types import (
    MAX_UINT64,
    TxType,
    TransactionHeader,
    PaymentParams,
    KeyRegParams,
    AssetID,
    AssetParams,
    AssetConfigParams,
    PaymentTransaction,
    KeyRegTransaction,
    AssetConfigTransaction,
    Transaction,
    MultisigSubsig,
    MultisigSig,
)
from .codec import to_record, from_record, canonical_bytes, decode_transaction
from .signing import (
    TX_DOMAIN_TAG,
    SignedTransaction,
    signable_bytes,
    transaction_id,
    sign_transaction,
    encode_signed_transaction,
)
from .fees import MIN_TXN_FEE, FeeParams, estimate_size, calculate_fee, resolve_fee
from .builders import (
    TransactionInput,
    PaymentTransactionInput,
    KeyRegTransactionInput,
    AssetConfigTransactionInput,
    build_transaction,
    get_input_cls_for,
    make_input,
    list_transaction_types,
)

__all__ = [
    "MAX_UINT64",
    "TxType",
    "TransactionHeader",
    "PaymentParams",
    "KeyRegParams",
    "AssetID",
    "AssetParams",
    "AssetConfigParams",
    "PaymentTransaction",
    "KeyRegTransaction",
    "AssetConfigTransaction",
    "Transaction",
    "MultisigSubsig",
    "MultisigSig",
    "to_record",
    "from_record",
    "canonical_bytes",
    "decode_transaction",
    "TX_DOMAIN_TAG",
    "SignedTransaction",
    "signable_bytes",
    "transaction_id",
    "sign_transaction",
    "encode_signed_transaction",
    "MIN_TXN_FEE",
    "FeeParams",
    "estimate_size",
    "calculate_fee",
    "resolve_fee",
    "TransactionInput",
    "PaymentTransactionInput",
    "KeyRegTransactionInput",
    "AssetConfigTransactionInput",
    "build_transaction",
    "get_input_cls_for",
    "make_input",
    "list_transaction_types",
]
