"""
Algorand Codec Module

Byte-level encodings the protocol is built on:
- msgpack_codec.py: canonical MessagePack (sorted keys, defaults omitted)
- encoding.py: unpadded base32 and standard base64 text encodings
"""

from .encoding import base32_decode, base32_encode, base64_decode, base64_encode
from .msgpack_codec import decode_canonical, encode_canonical

__all__ = [
    "base32_decode",
    "base32_encode",
    "base64_decode",
    "base64_encode",
    "decode_canonical",
    "encode_canonical",
]
