"""
Algorand Python SDK

Offline primitives for the Algorand protocol: addresses, mnemonic
phrases, accounts, canonical transaction encoding, fee resolution and
transaction signing.
"""

from .runtime.errors import *
from .crypto import *
from .codec import *
from .accounts import *
from .tx import *

__version__ = "0.1.0"
__all__ = [
    "__version__",
    # Errors
    "AlgorandError",
    "ErrorCode",
    "ErrorHandler",
    "AddressError",
    "MnemonicError",
    "TransactionError",
    "BuilderError",
    "GenesisHashError",
    "UnknownTransactionTypeError",
    "InvalidKeyError",
    "EncodingError",
    # Accounts
    "Address",
    "Account",
    "decode_address",
    "encode_address",
    "is_valid_address",
    "mnemonic_from_seed",
    "seed_from_mnemonic",
    # Transactions
    "TxType",
    "PaymentTransaction",
    "KeyRegTransaction",
    "AssetConfigTransaction",
    "SignedTransaction",
    "PaymentTransactionInput",
    "KeyRegTransactionInput",
    "AssetConfigTransactionInput",
    "FeeParams",
    "MIN_TXN_FEE",
    "build_transaction",
    "sign_transaction",
    "encode_signed_transaction",
    "transaction_id",
    "decode_transaction",
]
