"""
Algorand Error Model

This module provides the error handling framework for the Algorand Python SDK.
Every failure raised by the address, mnemonic and transaction codecs is a
subclass of AlgorandError carrying a stable ErrorCode and the offending
context in ``details``.
"""

from __future__ import annotations
from typing import Optional, Dict, Any
from enum import IntEnum


class ErrorCode(IntEnum):
    """Error codes for the Algorand codec layer."""

    # Success
    OK = 0

    # General errors (1-99)
    UNKNOWN = 1
    INTERNAL = 2

    # Encoding errors (100-199)
    ENCODING_ERROR = 100
    INVALID_BASE32 = 101
    INVALID_BASE64 = 102
    MARSHAL_ERROR = 103
    UNMARSHAL_ERROR = 104

    # Address errors (200-299)
    INVALID_CHECKSUM_ADDRESS = 200
    WRONG_ADDRESS_LENGTH = 201
    WRONG_ADDRESS_BYTE_LENGTH = 202

    # Mnemonic errors (300-399)
    INVALID_PHRASE = 300
    INVALID_PHRASE_WORD = 301
    INVALID_CHECKSUM = 302
    INVALID_SEED = 303
    MNEMONIC_DECODE_ERROR = 304

    # Transaction errors (400-499)
    INVALID_TRANSACTION = 400
    INVALID_GENESIS_HASH = 401
    UNKNOWN_TRANSACTION_TYPE = 402
    BUILDER_ERROR = 403

    # Key errors (700-799)
    INVALID_KEY = 700
    INVALID_SIGNATURE = 701


class AlgorandError(Exception):
    """
    Root of every error raised by this package.

    ``code`` is stable across releases, ``details`` names the offending
    values and ``cause`` keeps the lower-level exception, if any.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        """Render as ``[CODE] message | Details: ... | Caused by: ...``."""
        parts = [f"[{self.code.name}] {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly dict; the cause is kept as text."""
        result = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.cause:
            result["cause"] = str(self.cause)
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AlgorandError':
        """Rebuild an error from to_dict() output (the cause is not restored)."""
        code = ErrorCode(data.get("code", ErrorCode.UNKNOWN))
        message = data.get("message", "Unknown error")
        details = data.get("details")
        return cls(message, code, details)


# =============================================================================
# Encoding errors
# =============================================================================

class EncodingError(AlgorandError):
    """Data encoding/decoding errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.ENCODING_ERROR,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class MarshalError(EncodingError):
    """Canonical encoding failed."""

    def __init__(self, message: str = "Marshal error",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.MARSHAL_ERROR, details, cause)


class UnmarshalError(EncodingError):
    """Canonical decoding failed."""

    def __init__(self, message: str = "Unmarshal error",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.UNMARSHAL_ERROR, details, cause)


# =============================================================================
# Address errors
# =============================================================================

class AddressError(AlgorandError):
    """Address parsing and construction errors."""
    pass


class InvalidChecksumAddressError(AddressError):
    """Address text did not decode, or its checksum did not match."""

    def __init__(self, address: str, cause: Optional[Exception] = None):
        super().__init__(
            f"Invalid checksum address {address}",
            ErrorCode.INVALID_CHECKSUM_ADDRESS,
            {"address": address},
            cause,
        )
        self.address = address


class WrongAddressLengthError(AddressError):
    """Decoded address (payload + checksum) has the wrong size."""

    def __init__(self, expected: int, actual: int):
        super().__init__(
            f"Wrong address length, should be {expected} length got {actual}",
            ErrorCode.WRONG_ADDRESS_LENGTH,
            {"expected": expected, "actual": actual},
        )
        self.expected = expected
        self.actual = actual


class WrongAddressByteLengthError(AddressError):
    """Raw address bytes have the wrong size."""

    def __init__(self, expected: int, actual: int):
        super().__init__(
            f"Wrong address byte length, should be {expected} length got {actual}",
            ErrorCode.WRONG_ADDRESS_BYTE_LENGTH,
            {"expected": expected, "actual": actual},
        )
        self.expected = expected
        self.actual = actual


# =============================================================================
# Mnemonic errors
# =============================================================================

class MnemonicError(AlgorandError):
    """Mnemonic phrase and seed errors."""
    pass


class InvalidPhraseError(MnemonicError):
    """Phrase does not have the expected number of words."""

    def __init__(self, phrase: str, word_count: int):
        super().__init__(
            f"Invalid Mnemonic Phrase. Should have 25 words but got: {word_count}",
            ErrorCode.INVALID_PHRASE,
            {"word_count": word_count},
        )
        self.phrase = phrase
        self.word_count = word_count


class InvalidPhraseWordError(MnemonicError):
    """Phrase contains a word that is not in the dictionary."""

    def __init__(self, word: str):
        super().__init__(
            f"Invalid word [{word}] found in phrase",
            ErrorCode.INVALID_PHRASE_WORD,
            {"word": word},
        )
        self.word = word


class InvalidChecksumError(MnemonicError):
    """Checksum word does not match the decoded seed."""

    def __init__(self, message: str = "Invalid Checksum"):
        super().__init__(message, ErrorCode.INVALID_CHECKSUM)


class InvalidSeedError(MnemonicError):
    """Seed has the wrong size."""

    def __init__(self, actual: int, expected: int = 32):
        super().__init__(
            "Invalid Seed for Mnemonic",
            ErrorCode.INVALID_SEED,
            {"expected": expected, "actual": actual},
        )


class MnemonicDecodeError(MnemonicError):
    """Bit unpacking produced an inconsistent byte stream."""

    def __init__(self, message: str):
        super().__init__(f"Error with mnemonic: {message}", ErrorCode.MNEMONIC_DECODE_ERROR)


# =============================================================================
# Transaction errors
# =============================================================================

class TransactionError(AlgorandError):
    """Transaction construction and encoding errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INVALID_TRANSACTION,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class BuilderError(TransactionError):
    """Transaction builder specific errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.BUILDER_ERROR, details, cause)


class GenesisHashError(TransactionError):
    """Genesis hash missing, malformed or of the wrong length."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_GENESIS_HASH, details, cause)


class UnknownTransactionTypeError(TransactionError):
    """Transaction type tag is not one of the supported variants."""

    def __init__(self, tx_type: Any):
        super().__init__(
            f"Unknown transaction type {tx_type}",
            ErrorCode.UNKNOWN_TRANSACTION_TYPE,
            {"type": str(tx_type)},
        )
        self.tx_type = tx_type


class InvalidKeyError(AlgorandError):
    """Key material has the wrong size or cannot be decoded."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_KEY, details, cause)


class ErrorHandler:
    """
    Classifies exceptions raised by this package.
    """

    @staticmethod
    def is_user_error(error: Exception) -> bool:
        """
        Check if an error was caused by caller input rather than corrupt data.

        A MnemonicDecodeError means the bit packing itself is inconsistent;
        every other package error points at the value the caller passed in.

        Args:
            error: Exception to check

        Returns:
            True for input validation failures
        """
        if not isinstance(error, AlgorandError):
            return False
        return error.code not in (ErrorCode.MNEMONIC_DECODE_ERROR, ErrorCode.INTERNAL)


__all__ = [
    "ErrorCode",
    "AlgorandError",
    "EncodingError",
    "MarshalError",
    "UnmarshalError",
    "AddressError",
    "InvalidChecksumAddressError",
    "WrongAddressLengthError",
    "WrongAddressByteLengthError",
    "MnemonicError",
    "InvalidPhraseError",
    "InvalidPhraseWordError",
    "InvalidChecksumError",
    "InvalidSeedError",
    "MnemonicDecodeError",
    "TransactionError",
    "BuilderError",
    "GenesisHashError",
    "UnknownTransactionTypeError",
    "InvalidKeyError",
    "ErrorHandler",
]
