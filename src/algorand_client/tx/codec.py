"""
Canonical wire projection of transactions.

Every field is written under its fixed short key; the resulting record
is canonicalized (sorted keys, default values dropped) before it is
hashed, signed or sent.

    header   fee fv gen gh grp lv note snd type
    pay      amt close rcv
    keyreg   selkey votefst votekd votekey votelst
    acfg     apar{an c df f m r t un} caid{c i}
"""

from typing import Any, Dict, Optional

from pydantic import ValidationError

from ..accounts.address import ADDRESS_BYTES_LENGTH, Address
from ..codec.msgpack_codec import canonicalize, decode_canonical, encode_canonical
from ..runtime.errors import AddressError, UnmarshalError
from .types import (
    AssetConfigParams,
    AssetConfigTransaction,
    AssetID,
    AssetParams,
    KeyRegParams,
    KeyRegTransaction,
    MultisigSig,
    MultisigSubsig,
    PaymentParams,
    PaymentTransaction,
    TransactionHeader,
    TxType,
)

_ZERO_ADDRESS = bytes(ADDRESS_BYTES_LENGTH)


def _address_bytes(address: Optional[Address]) -> Optional[bytes]:
    return address.to_bytes() if address is not None else None


def to_record(txn) -> Dict[str, Any]:
    """
    Project a transaction onto its canonical wire record.

    Args:
        txn: PaymentTransaction, KeyRegTransaction or AssetConfigTransaction

    Returns:
        Key-sorted record with every default-valued field removed

    Raises:
        TypeError: If txn is not one of the transaction variants
    """
    if isinstance(txn, PaymentTransaction):
        body = _payment_record(txn.params)
    elif isinstance(txn, KeyRegTransaction):
        body = _key_reg_record(txn.params)
    elif isinstance(txn, AssetConfigTransaction):
        body = _asset_config_record(txn.params)
    else:
        raise TypeError(f"Not a transaction: {type(txn).__name__}")

    header = txn.header
    record: Dict[str, Any] = {
        "fee": header.fee,
        "fv": header.first_valid,
        "gen": header.genesis_id,
        "gh": header.genesis_hash,
        "grp": header.group,
        "lv": header.last_valid,
        "note": header.note,
        "snd": header.sender.to_bytes(),
        "type": txn.tx_type.value,
    }
    record.update(body)
    return canonicalize(record)


def _payment_record(params: PaymentParams) -> Dict[str, Any]:
    return {
        "amt": params.amount,
        "close": _address_bytes(params.close_remainder_to),
        "rcv": params.receiver.to_bytes(),
    }


def _key_reg_record(params: KeyRegParams) -> Dict[str, Any]:
    return {
        "selkey": params.selection_pk,
        "votefst": params.vote_first,
        "votekd": params.vote_key_dilution,
        "votekey": params.vote_pk,
        "votelst": params.vote_last,
    }


def _asset_config_record(params: AssetConfigParams) -> Dict[str, Any]:
    record: Dict[str, Any] = {
        "caid": {
            "c": params.asset_id.creator.to_bytes(),
            "i": params.asset_id.index,
        },
    }
    asset_params = params.asset_params
    if asset_params is not None:
        record["apar"] = {
            "an": asset_params.asset_name,
            "c": _address_bytes(asset_params.clawback),
            "df": asset_params.default_frozen,
            "f": _address_bytes(asset_params.freeze),
            "m": _address_bytes(asset_params.manager),
            "r": _address_bytes(asset_params.reserve),
            "t": asset_params.total,
            "un": asset_params.unit_name,
        }
    return record


def canonical_bytes(txn) -> bytes:
    """Encode a transaction as canonical MessagePack."""
    return encode_canonical(to_record(txn))


def from_record(record: Dict[str, Any]):
    """
    Rebuild a transaction from its wire record.

    Absent keys take their default values.

    Raises:
        UnknownTransactionTypeError: If the type tag is not pay, keyreg or acfg
        UnmarshalError: If a field has the wrong shape
    """
    if not isinstance(record, dict):
        raise UnmarshalError(f"Transaction record must be a map, got {type(record).__name__}")

    tx_type = TxType.from_str(record.get("type", ""))

    try:
        header = TransactionHeader(
            sender=Address.from_bytes(record.get("snd", _ZERO_ADDRESS)),
            fee=record.get("fee", 0),
            first_valid=record.get("fv", 0),
            last_valid=record.get("lv", 0),
            note=record.get("note"),
            genesis_id=record.get("gen", ""),
            genesis_hash=record.get("gh", b""),
            group=record.get("grp"),
        )

        if tx_type is TxType.PAYMENT:
            return PaymentTransaction(header=header, params=_payment_from_record(record))
        elif tx_type is TxType.KEY_REG:
            return KeyRegTransaction(header=header, params=_key_reg_from_record(record))
        else:
            return AssetConfigTransaction(header=header, params=_asset_config_from_record(record))
    except (ValidationError, AddressError, TypeError, AttributeError) as e:
        raise UnmarshalError(f"Malformed {tx_type.value} transaction record: {e}", cause=e)


def _optional_address(value: Optional[bytes]) -> Optional[Address]:
    return Address.from_bytes(value) if value is not None else None


def _payment_from_record(record: Dict[str, Any]) -> PaymentParams:
    return PaymentParams(
        receiver=Address.from_bytes(record.get("rcv", _ZERO_ADDRESS)),
        amount=record.get("amt", 0),
        close_remainder_to=_optional_address(record.get("close")),
    )


def _key_reg_from_record(record: Dict[str, Any]) -> KeyRegParams:
    return KeyRegParams(
        vote_pk=record.get("votekey", b""),
        selection_pk=record.get("selkey", b""),
        vote_first=record.get("votefst", 0),
        vote_last=record.get("votelst", 0),
        vote_key_dilution=record.get("votekd", 0),
    )


def _asset_config_from_record(record: Dict[str, Any]) -> AssetConfigParams:
    caid = record.get("caid", {})
    asset_id = AssetID(
        creator=Address.from_bytes(caid.get("c", _ZERO_ADDRESS)),
        index=caid.get("i", 0),
    )

    apar = record.get("apar")
    asset_params = None
    if apar is not None:
        asset_params = AssetParams(
            asset_name=apar.get("an"),
            unit_name=apar.get("un"),
            total=apar.get("t"),
            default_frozen=apar.get("df"),
            manager=_optional_address(apar.get("m")),
            reserve=_optional_address(apar.get("r")),
            freeze=_optional_address(apar.get("f")),
            clawback=_optional_address(apar.get("c")),
        )

    return AssetConfigParams(asset_id=asset_id, asset_params=asset_params)


def decode_transaction(data: bytes):
    """Decode canonical MessagePack bytes into a transaction."""
    return from_record(decode_canonical(data))


def multisig_to_record(msig: Optional[MultisigSig]) -> Optional[Dict[str, Any]]:
    """Project a multisignature onto its wire record (keys subsig, thr, v)."""
    if msig is None:
        return None
    return {
        "subsig": [{"pk": sub.key, "s": sub.signature} for sub in msig.subsigs],
        "thr": msig.threshold,
        "v": msig.version,
    }


def multisig_from_record(record: Optional[Dict[str, Any]]) -> Optional[MultisigSig]:
    """Rebuild a multisignature from its wire record."""
    if record is None:
        return None
    try:
        return MultisigSig(
            subsigs=tuple(
                MultisigSubsig(key=sub.get("pk", b""), signature=sub.get("s"))
                for sub in record.get("subsig", [])
            ),
            threshold=record.get("thr", 0),
            version=record.get("v", 0),
        )
    except (ValidationError, TypeError, AttributeError) as e:
        raise UnmarshalError(f"Malformed multisig record: {e}", cause=e)


__all__ = [
    "to_record",
    "from_record",
    "canonical_bytes",
    "decode_transaction",
    "multisig_to_record",
    "multisig_from_record",
]
