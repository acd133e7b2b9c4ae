"""
Payment transaction input for the Algorand protocol.
"""

from __future__ import annotations
from typing import Optional

from ...accounts.address import Address
from ..types import AssetConfigParams, KeyRegParams, MicroAlgos, PaymentParams, TxType
from .base import TransactionInput


class PaymentTransactionInput(TransactionInput):
    """Input for pay transactions."""

    to: str
    amount: MicroAlgos
    # Close the sender account and send its remaining funds here
    close_remainder_to: Optional[str] = None

    @property
    def tx_type(self) -> TxType:
        return TxType.PAYMENT

    def build_payment_params(self) -> Optional[PaymentParams]:
        """
        Decode the receiver and close-to addresses.

        Raises:
            AddressError: If either address is invalid
        """
        close_to = None
        if self.close_remainder_to is not None:
            close_to = Address.from_string(self.close_remainder_to)

        return PaymentParams(
            receiver=Address.from_string(self.to),
            amount=self.amount,
            close_remainder_to=close_to,
        )

    def build_key_reg_params(self) -> Optional[KeyRegParams]:
        return None

    def build_asset_config_params(self) -> Optional[AssetConfigParams]:
        return None


__all__ = ["PaymentTransactionInput"]
