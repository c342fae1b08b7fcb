"""Random, uniformly distributed 64-bit identifiers."""

import json
import os
import re
import sys
import threading
from typing import Any, Union

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

_BLOCK_SIZE = 16
_ID_SIZE = _BLOCK_SIZE // 2
_KEY_SIZE = 16
_MAX_ID = 1 << 64
_HEX = re.compile(r"[0-9a-fA-F]+")


class ID(int):
    """An unsigned 64-bit identifier, shown as 16 lowercase hex digits."""

    def __new__(cls, value: int = 0) -> "ID":
        number = int(value)
        if not 0 <= number < _MAX_ID:
            raise ValueError(f"{number} does not fit in 64 unsigned bits")
        return super().__new__(cls, number)

    def __str__(self) -> str:
        return f"{int(self):016x}"

    def __repr__(self) -> str:
        return f"ID({int(self)})"

    def __format__(self, spec: str) -> str:
        if not spec:
            return str(self)
        return format(int(self), spec)

    def to_json(self) -> str:
        """Encode the ID as a JSON string of hex digits."""
        return json.dumps(str(self))


def parse_id(text: str) -> ID:
    """Parse ``text`` as unsigned hexadecimal digits, without prefix."""
    if not _HEX.fullmatch(text):
        raise ValueError(f"invalid hexadecimal ID: {text!r}")
    number = int(text, 16)
    if number >= _MAX_ID:
        raise ValueError(f"hexadecimal ID out of range: {text!r}")
    return ID(number)


def id_from_json(data: Union[str, bytes]) -> ID:
    """Decode JSON holding either a hex string or an unsigned integer."""
    try:
        decoded: Any = json.loads(data)
    except ValueError:
        decoded = ...
    if decoded is None:
        return ID(0)
    if isinstance(decoded, str):
        try:
            return parse_id(decoded)
        except ValueError:
            pass
    elif isinstance(decoded, int) and not isinstance(decoded, bool):
        if 0 <= decoded < _MAX_ID:
            return ID(decoded)
    shown = data.decode("utf-8", "replace") if isinstance(data, bytes) else data
    raise ValueError(f"{shown} is not a valid ID")


class _KeystreamGenerator:
    """Hands out 64-bit chunks of an AES-128-CTR keystream."""

    def __init__(self) -> None:
        seed = os.urandom(_KEY_SIZE + _BLOCK_SIZE)
        key, counter = seed[:_KEY_SIZE], seed[_KEY_SIZE:]
        self._encryptor = Cipher(algorithms.AES(key), modes.CTR(counter)).encryptor()
        self._buffer = b""
        self._lock = threading.Lock()

    def next_id(self) -> ID:
        with self._lock:
            if not self._buffer:
                self._buffer = self._encryptor.update(bytes(_BLOCK_SIZE))
            chunk, self._buffer = self._buffer[:_ID_SIZE], self._buffer[_ID_SIZE:]
        return ID(int.from_bytes(chunk, sys.byteorder))


_generator = _KeystreamGenerator()


def generate_id() -> ID:
    """Return a random 64-bit ID. Safe to call from several threads."""
    return _generator.next_id()