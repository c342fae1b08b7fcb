"""Discovery of the local machine's IPv4 addresses."""

import ipaddress
import socket
from typing import List

import psutil

_PRIVATE_BLOCKS = tuple(
    ipaddress.ip_network(block)
    for block in ("10.0.0.0/8", "172.16.0.0/12", "192.168.0.0/16", "100.64.0.0/10")
)


def _is_private(ip: str) -> bool:
    try:
        address = ipaddress.ip_address(ip)
    except ValueError:
        return False
    return any(address in block for block in _PRIVATE_BLOCKS)


def _ipv4_addresses() -> List[str]:
    found = []
    for addresses in psutil.net_if_addrs().values():
        for entry in addresses:
            if entry.family == socket.AF_INET:
                found.append(entry.address)
    return found


def extract(address: str) -> str:
    """Return ``address``, or a private IPv4 address of this host if it is unset.

    ``""``, ``"0.0.0.0"`` and ``"[::]"`` count as unset. Raises ``OSError`` if
    no private address can be found.
    """
    if address and address not in ("0.0.0.0", "[::]"):
        return address
    try:
        candidates = _ipv4_addresses()
    except Exception as err:
        raise OSError(f"Failed to get interface addresses! Err: {err}") from err
    for candidate in candidates:
        if _is_private(candidate):
            return candidate
    raise OSError("No private IP address found, and explicit IP not provided")


def ips() -> List[str]:
    """Return every IPv4 address of this host, or an empty list on failure."""
    try:
        return _ipv4_addresses()
    except Exception:
        return []