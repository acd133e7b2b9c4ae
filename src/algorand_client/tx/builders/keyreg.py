"""
Key registration transaction input for the Algorand protocol.

Participation keys are given as base64 text and must decode to
32 bytes each.
"""

from __future__ import annotations
from typing import Optional

from ...codec.encoding import base64_decode
from ...crypto.ed25519 import PUBLIC_KEY_LENGTH
from ...runtime.errors import EncodingError, InvalidKeyError
from ..types import AssetConfigParams, KeyRegParams, PaymentParams, Round, TxType, Uint64
from .base import TransactionInput


def decode_participation_key(name: str, value: str) -> bytes:
    """
    Decode a base64 participation key.

    Raises:
        InvalidKeyError: If value is not base64 or does not decode to 32 bytes
    """
    try:
        key = base64_decode(value)
    except EncodingError as e:
        raise InvalidKeyError(f"{name} is not valid base64", details={"key": name}, cause=e)

    if len(key) != PUBLIC_KEY_LENGTH:
        raise InvalidKeyError(
            f"{name} must be {PUBLIC_KEY_LENGTH} bytes, got {len(key)}",
            details={"key": name, "expected": PUBLIC_KEY_LENGTH, "actual": len(key)},
        )
    return key


class KeyRegTransactionInput(TransactionInput):
    """Input for keyreg transactions."""

    vote_pk: str
    selection_pk: str
    vote_first: Round
    vote_last: Round
    vote_key_dilution: Uint64

    @property
    def tx_type(self) -> TxType:
        return TxType.KEY_REG

    def build_payment_params(self) -> Optional[PaymentParams]:
        return None

    def build_key_reg_params(self) -> Optional[KeyRegParams]:
        """
        Decode the participation keys.

        Raises:
            InvalidKeyError: If either key is malformed
        """
        return KeyRegParams(
            vote_pk=decode_participation_key("vote_pk", self.vote_pk),
            selection_pk=decode_participation_key("selection_pk", self.selection_pk),
            vote_first=self.vote_first,
            vote_last=self.vote_last,
            vote_key_dilution=self.vote_key_dilution,
        )

    def build_asset_config_params(self) -> Optional[AssetConfigParams]:
        return None


__all__ = ["KeyRegTransactionInput", "decode_participation_key"]
