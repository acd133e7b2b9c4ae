"""
Transaction signing and identification.

The bytes that are signed and hashed are the canonical encoding of the
transaction prefixed with the domain-separation tag ``b"TX"``. The
transaction ID is the unpadded base32 SHA-512/256 digest of those bytes.
"""

import logging
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from ..accounts.account import Account, verify_address_signature
from ..codec.encoding import base32_encode
from ..codec.msgpack_codec import canonicalize, decode_canonical, encode_canonical
from ..crypto.ed25519 import SIGNATURE_LENGTH
from ..crypto.hashes import sha512_256
from ..runtime.errors import UnmarshalError
from .codec import (
    canonical_bytes,
    from_record,
    multisig_from_record,
    multisig_to_record,
    to_record,
)
from .types import MultisigSig, Transaction

logger = logging.getLogger(__name__)

TX_DOMAIN_TAG = b"TX"


def signable_bytes(txn) -> bytes:
    """Return the domain-tagged bytes that are signed and hashed."""
    return TX_DOMAIN_TAG + canonical_bytes(txn)


def transaction_id(txn) -> str:
    """
    Compute the transaction ID.

    Returns:
        52-character unpadded base32 string
    """
    return base32_encode(sha512_256(signable_bytes(txn)))


class SignedTransaction(BaseModel):
    """A transaction together with its Ed25519 signature and ID."""

    transaction: Transaction
    signature: bytes = Field(min_length=SIGNATURE_LENGTH, max_length=SIGNATURE_LENGTH)
    multisig: Optional[MultisigSig] = None
    txn_id: str

    model_config = {"frozen": True}

    def to_record(self) -> Dict[str, Any]:
        """Project onto the signed wire record (keys msig, sig, txn)."""
        return canonicalize({
            "msig": multisig_to_record(self.multisig),
            "sig": self.signature,
            "txn": to_record(self.transaction),
        })

    def encode(self) -> bytes:
        """Encode as canonical MessagePack, ready for submission."""
        return encode_canonical(self.to_record())

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "SignedTransaction":
        """
        Rebuild a signed transaction from its wire record.

        Raises:
            UnmarshalError: If the record is missing its signature or transaction
        """
        if "txn" not in record:
            raise UnmarshalError("Signed transaction record has no txn")
        if "sig" not in record:
            raise UnmarshalError("Signed transaction record has no sig")

        txn = from_record(record["txn"])
        signature = record["sig"]
        if not isinstance(signature, bytes) or len(signature) != SIGNATURE_LENGTH:
            raise UnmarshalError(
                f"Signature must be {SIGNATURE_LENGTH} bytes",
                details={"actual": len(signature) if isinstance(signature, bytes) else None},
            )

        return cls(
            transaction=txn,
            signature=signature,
            multisig=multisig_from_record(record.get("msig")),
            txn_id=transaction_id(txn),
        )

    @classmethod
    def decode(cls, data: bytes) -> "SignedTransaction":
        """Decode canonical MessagePack bytes into a signed transaction."""
        return cls.from_record(decode_canonical(data))

    def verify(self) -> bool:
        """
        Check the signature against the transaction sender.

        Returns:
            True if the single signature is valid for the sender's key
        """
        if self.multisig is not None:
            return False
        return verify_address_signature(
            self.transaction.sender, signable_bytes(self.transaction), self.signature
        )


def sign_transaction(txn, account: Account) -> SignedTransaction:
    """
    Sign a transaction with an account.

    Args:
        txn: Transaction to sign
        account: Signing account

    Returns:
        SignedTransaction carrying the signature and transaction ID
    """
    message = signable_bytes(txn)
    signature = account.sign(message)
    txn_id = base32_encode(sha512_256(message))
    logger.debug("Signed %s transaction %s", txn.tx_type.value, txn_id)
    return SignedTransaction(transaction=txn, signature=signature, txn_id=txn_id)


def encode_signed_transaction(stx: SignedTransaction) -> bytes:
    """Encode a signed transaction as canonical MessagePack."""
    return stx.encode()


__all__ = [
    "TX_DOMAIN_TAG",
    "signable_bytes",
    "transaction_id",
    "SignedTransaction",
    "sign_transaction",
    "encode_signed_transaction",
]
