from __future__ import annotations

import struct

# BSON element type tags (bsonspec.org).
BSON_TYPE_DOUBLE = 0x01
BSON_TYPE_ARRAY = 0x04

# Keys of the longitude and latitude array elements, NUL excluded.
INDEX_KEYS: tuple[bytes, bytes] = (b"0", b"1")

_INT32 = struct.Struct("<i")
_FLOAT64 = struct.Struct("<d")

LENGTH_PREFIX_SIZE = _INT32.size


def int32_bytes(value: int) -> bytes:
    return _INT32.pack(value)


def float64_bytes(value: float) -> bytes:
    return _FLOAT64.pack(value)


def format_fixed(value: float, digits: int = 10) -> str:
    """Fixed-point rendering with ``digits`` fractional digits."""

    return f"{value:.{digits}f}"
