"""
Transaction inputs for the Algorand protocol.

Each input validates user-facing fields and builds one transaction type.
"""

from .base import TransactionInput, build_transaction, decode_genesis_hash
from .payment import PaymentTransactionInput
from .keyreg import KeyRegTransactionInput, decode_participation_key
from .asset import AssetConfigTransactionInput
from .registry import INPUT_REGISTRY, get_input_cls_for, list_transaction_types, make_input

__all__ = [
    "TransactionInput",
    "build_transaction",
    "decode_genesis_hash",
    "decode_participation_key",
    "PaymentTransactionInput",
    "KeyRegTransactionInput",
    "AssetConfigTransactionInput",
    "INPUT_REGISTRY",
    "get_input_cls_for",
    "make_input",
    "list_transaction_types",
]
