"""Version 4 UUIDs and parsing of their common text forms."""

import os
import re
from dataclasses import dataclass

_UUID_PATTERN = re.compile(
    r"\{?([a-fA-F0-9]{8})-?([a-fA-F0-9]{4})-?([a-fA-F0-9]{4})"
    r"-?([a-fA-F0-9]{4})-?([a-fA-F0-9]{12})\}?"
)


@dataclass(frozen=True)
class UUID:
    """A 16-byte UUID."""

    data: bytes

    def __post_init__(self) -> None:
        if len(self.data) != 16:
            raise ValueError("a UUID holds exactly 16 bytes")

    def hex(self) -> str:
        """Return the ``xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx`` form."""
        digits = self.data.hex()
        return "-".join(
            (digits[:8], digits[8:12], digits[12:16], digits[16:20], digits[20:])
        )

    def __str__(self) -> str:
        return self.hex()


def random_uuid() -> UUID:
    """Generate a new random version 4 UUID."""
    raw = bytearray(os.urandom(16))
    raw[6] = (raw[6] & 0x0F) | 0x40
    raw[8] = (raw[8] & 0x3F) | 0x80
    return UUID(bytes(raw))


def parse_uuid(text: str) -> UUID:
    """Parse a UUID written with or without dashes, optionally in braces."""
    if text == "":
        raise ValueError("Empty string")
    match = _UUID_PATTERN.fullmatch(text)
    if match is None:
        raise ValueError("Invalid string format")
    return UUID(bytes.fromhex("".join(match.groups())))