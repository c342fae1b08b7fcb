"""Conversions between plain values and their byte representations."""

import json
import struct
from typing import Any


def bool_to_bytes(value: bool) -> bytes:
    """Encode a boolean as a single byte, 1 or 0."""
    return int(bool(value)).to_bytes(1, "big")


def bytes_to_bool(buf: bytes) -> bool:
    """Decode a boolean from the first byte of ``buf``."""
    if not buf:
        raise ValueError("empty buffer")
    return buf[0] != 0


def int32_to_bytes(value: int) -> bytes:
    """Encode a signed 32-bit integer, big-endian."""
    return struct.pack(">i", value)


def bytes_to_int32(buf: bytes) -> int:
    """Decode a signed 32-bit big-endian integer from the start of ``buf``."""
    return struct.unpack_from(">i", buf)[0]


def int64_to_bytes(value: int) -> bytes:
    """Encode a signed 64-bit integer, big-endian."""
    return struct.pack(">q", value)


def bytes_to_int64(buf: bytes) -> int:
    """Decode a signed 64-bit big-endian integer from the start of ``buf``."""
    return struct.unpack_from(">q", buf)[0]


def float32_to_bytes(value: float) -> bytes:
    """Encode a single-precision float, little-endian."""
    return struct.pack("<f", value)


def bytes_to_float32(buf: bytes) -> float:
    """Decode a single-precision little-endian float from the start of ``buf``."""
    return struct.unpack_from("<f", buf)[0]


def float64_to_bytes(value: float) -> bytes:
    """Encode a double-precision float, little-endian."""
    return struct.pack("<d", value)


def bytes_to_float64(buf: bytes) -> float:
    """Decode a double-precision little-endian float from the start of ``buf``."""
    return struct.unpack_from("<d", buf)[0]


def _dump(mapping: dict) -> bytes:
    return json.dumps(
        mapping, sort_keys=True, separators=(",", ":"), ensure_ascii=False
    ).encode("utf-8")


def _load_object(data: bytes) -> dict:
    if data.strip() == b"null":
        return {}
    decoded = json.loads(data)
    if not isinstance(decoded, dict):
        raise ValueError(f"expected a JSON object, got {type(decoded).__name__}")
    return decoded


def map_to_bytes(mapping: dict[str, Any]) -> bytes:
    """Serialise a mapping as compact JSON with sorted keys."""
    return _dump(mapping)


def bytes_to_map(data: bytes) -> dict[str, Any]:
    """Parse a JSON object into a dict."""
    return _load_object(data)


def map_to_bytes_string(mapping: dict[str, str]) -> bytes:
    """Serialise a string-to-string mapping as compact JSON with sorted keys."""
    for key, value in mapping.items():
        if not isinstance(value, str):
            raise TypeError(f"value for {key!r} is not a string")
    return _dump(mapping)


def bytes_to_map_string(data: bytes) -> dict[str, str]:
    """Parse a JSON object whose values are all strings."""
    decoded = _load_object(data)
    for key, value in decoded.items():
        if not isinstance(value, str):
            raise ValueError(f"value for {key!r} is not a string")
    return decoded