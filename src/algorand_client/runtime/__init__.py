"""Runtime helpers for the Algorand Python SDK"""

from .errors import AlgorandError, ErrorCode, ErrorHandler

__all__ = [
    "AlgorandError",
    "ErrorCode",
    "ErrorHandler",
]
