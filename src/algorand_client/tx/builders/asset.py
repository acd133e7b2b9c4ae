"""
Asset configuration transaction input for the Algorand protocol.

Only the four control addresses can be set through this input. When
none of them is given the transaction carries no asset parameters,
which destroys the asset.
"""

from __future__ import annotations
from typing import Optional

from ...accounts.address import Address
from ..types import (
    AssetConfigParams,
    AssetID,
    AssetParams,
    KeyRegParams,
    PaymentParams,
    TxType,
    Uint64,
)
from .base import TransactionInput


def _optional_address(value: Optional[str]) -> Optional[Address]:
    return Address.from_string(value) if value is not None else None


class AssetConfigTransactionInput(TransactionInput):
    """Input for acfg transactions."""

    creator: str
    index: Uint64
    manager: Optional[str] = None
    reserve: Optional[str] = None
    freeze: Optional[str] = None
    clawback: Optional[str] = None

    @property
    def tx_type(self) -> TxType:
        return TxType.ASSET_CONFIG

    def build_payment_params(self) -> Optional[PaymentParams]:
        return None

    def build_key_reg_params(self) -> Optional[KeyRegParams]:
        return None

    def build_asset_config_params(self) -> Optional[AssetConfigParams]:
        """
        Decode the asset id and control addresses.

        Raises:
            AddressError: If any address is invalid
        """
        asset_id = AssetID(creator=Address.from_string(self.creator), index=self.index)

        manager = _optional_address(self.manager)
        reserve = _optional_address(self.reserve)
        freeze = _optional_address(self.freeze)
        clawback = _optional_address(self.clawback)

        asset_params = None
        if any(a is not None for a in (manager, reserve, freeze, clawback)):
            asset_params = AssetParams(
                manager=manager,
                reserve=reserve,
                freeze=freeze,
                clawback=clawback,
            )

        return AssetConfigParams(asset_id=asset_id, asset_params=asset_params)


__all__ = ["AssetConfigTransactionInput"]
