"""
Transaction fee resolution for the Algorand protocol.

A fee is either flat (used as given) or a per-byte rate multiplied by
the size of the signed transaction. Either way it is raised to the
network minimum.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional

from ..accounts.account import Account
from ..runtime.errors import BuilderError
from .signing import sign_transaction
from .types import MAX_UINT64

logger = logging.getLogger(__name__)

# Minimum fee, in MicroAlgos, the network accepts for a transaction
MIN_TXN_FEE = 1000


@dataclass
class FeeParams:
    """Network parameters for fee calculation."""

    # Floor applied to every resolved fee (MicroAlgos)
    min_fee: int = MIN_TXN_FEE

    def __post_init__(self):
        if not 0 <= self.min_fee <= MAX_UINT64:
            raise ValueError(f"min_fee out of range: {self.min_fee}")


def estimate_size(txn) -> int:
    """
    Estimate the encoded size of a transaction once signed.

    The transaction is signed with a throwaway random account; every
    Ed25519 signature has the same length, so the size does not depend
    on the signer.

    Returns:
        Length in bytes of the encoded signed transaction
    """
    signed = sign_transaction(txn, Account.generate())
    return len(signed.encode())


def calculate_fee(txn, fee: int, is_flat_fee: bool, params: Optional[FeeParams] = None) -> int:
    """
    Compute the fee a transaction should carry.

    Args:
        txn: Transaction to price; its header fee should hold the requested value
        fee: Flat fee, or fee per byte when is_flat_fee is False
        is_flat_fee: Whether fee is used as given
        params: Fee parameters (uses defaults if None)

    Returns:
        Resolved fee in MicroAlgos

    Raises:
        BuilderError: If the resolved fee does not fit in 64 bits
    """
    if params is None:
        params = FeeParams()

    if is_flat_fee:
        resolved = fee
    else:
        size = estimate_size(txn)
        resolved = fee * size
        logger.debug("Estimated %s transaction size: %d bytes", txn.tx_type.value, size)

    resolved = max(resolved, params.min_fee)
    if resolved > MAX_UINT64:
        raise BuilderError(
            "Resolved fee overflows 64 bits",
            details={"fee": fee, "is_flat_fee": is_flat_fee},
        )
    return resolved


def resolve_fee(txn, fee: int, is_flat_fee: bool, params: Optional[FeeParams] = None):
    """
    Return a copy of txn carrying its resolved fee.

    See calculate_fee() for the arguments.
    """
    resolved = calculate_fee(txn, fee, is_flat_fee, params)
    logger.debug("Resolved %s fee: %d", txn.tx_type.value, resolved)
    return txn.with_fee(resolved)


__all__ = [
    "MIN_TXN_FEE",
    "FeeParams",
    "estimate_size",
    "calculate_fee",
    "resolve_fee",
]
