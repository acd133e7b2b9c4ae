"""
Transaction input registry for the Algorand protocol.

Maps transaction type tags to their input classes.
"""

from typing import Any, Dict, List, Type, Union

from ..types import TxType
from .asset import AssetConfigTransactionInput
from .base import TransactionInput
from .keyreg import KeyRegTransactionInput
from .payment import PaymentTransactionInput

INPUT_REGISTRY: Dict[TxType, Type[TransactionInput]] = {
    TxType.PAYMENT: PaymentTransactionInput,
    TxType.KEY_REG: KeyRegTransactionInput,
    TxType.ASSET_CONFIG: AssetConfigTransactionInput,
}


def get_input_cls_for(tx_type: Union[str, TxType]) -> Type[TransactionInput]:
    """
    Get the input class for a transaction type.

    Args:
        tx_type: Transaction type or its wire tag (e.g. 'pay', 'keyreg')

    Raises:
        UnknownTransactionTypeError: If the transaction type is not supported
    """
    if not isinstance(tx_type, TxType):
        tx_type = TxType.from_str(tx_type)
    return INPUT_REGISTRY[tx_type]


def make_input(tx_type: Union[str, TxType], **fields: Any) -> TransactionInput:
    """
    Create a transaction input from keyword fields.

    Fields may use either the field name or its alias (``from`` for sender).
    """
    return get_input_cls_for(tx_type).model_validate(fields)


def list_transaction_types() -> List[str]:
    """
    Get list of all supported transaction types.

    Returns:
        List of transaction type tags
    """
    return [tx_type.value for tx_type in INPUT_REGISTRY]


__all__ = [
    "INPUT_REGISTRY",
    "get_input_cls_for",
    "make_input",
    "list_transaction_types",
]
