"""Utility toolbox: encodings, byte packing, identifiers, AES-CFB, IP helpers, containers and dataclass reflection."""

__version__ = "1.4.14"