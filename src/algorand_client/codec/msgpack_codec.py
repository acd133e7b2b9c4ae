"""
Canonical MessagePack - the deterministic encoder behind every hash,
signature and wire payload.

Canonical form:
- map keys are emitted in sorted order, at every nesting level
- fields holding a default value (None, 0, False, "", b"", empty
  containers) are omitted, never written as explicit defaults
- bytes are packed as msgpack ``bin``, text as msgpack ``str``
- integers use the smallest msgpack representation

Any two equal records therefore produce identical bytes.
"""

from typing import Any, Dict

import msgpack

from ..runtime.errors import MarshalError, UnmarshalError


def encode_canonical(record: Dict[str, Any]) -> bytes:
    """
    Encode a record as canonical MessagePack.

    Args:
        record: Mapping of short wire keys to values

    Returns:
        Canonical MessagePack bytes

    Raises:
        MarshalError: If the record holds a value msgpack cannot encode
    """
    try:
        return msgpack.packb(canonicalize(record), use_bin_type=True)
    except (TypeError, ValueError, OverflowError) as e:
        raise MarshalError(f"Failed to encode record: {e}", cause=e)


def decode_canonical(data: bytes) -> Dict[str, Any]:
    """
    Decode MessagePack bytes into a record.

    Raises:
        UnmarshalError: If the bytes are not a single msgpack map
    """
    try:
        record = msgpack.unpackb(bytes(data), raw=False)
    except (msgpack.exceptions.UnpackException, ValueError, TypeError) as e:
        raise UnmarshalError(f"Failed to decode msgpack: {e}", cause=e)

    if not isinstance(record, dict):
        raise UnmarshalError(f"Expected a msgpack map, got {type(record).__name__}")
    return record


def canonicalize(v: Any) -> Any:
    """
    Recursively canonicalize a value.

    - Maps: sort keys, drop default-valued entries, recurse into values
    - Lists: recurse into elements, preserve order
    - Primitives: pass through unchanged
    """
    if isinstance(v, dict):
        out = {}
        for key in sorted(v.keys()):
            value = canonicalize(v[key])
            if is_default(value):
                continue
            out[key] = value
        return out
    elif isinstance(v, (list, tuple)):
        return [canonicalize(item) for item in v]
    else:
        return v


def is_default(v: Any) -> bool:
    """Return True if v is the zero value for its type."""
    if v is None:
        return True
    if isinstance(v, (bool, int)):
        return not v
    if isinstance(v, (str, bytes, bytearray, dict, list, tuple)):
        return len(v) == 0
    return False


__all__ = [
    "encode_canonical",
    "decode_canonical",
    "canonicalize",
    "is_default",
]
