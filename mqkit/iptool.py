"""IPv4 helpers: private-range checks and client address discovery."""

import ipaddress
import re
from typing import Mapping, Optional, Sequence, Union

_ATOI = re.compile(r"[+-]?\d+")

HeaderValue = Union[str, Sequence[str]]


def _header(headers: Optional[Mapping[str, HeaderValue]], name: str) -> str:
    if not headers:
        return ""
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            if isinstance(value, str):
                return value
            return value[0] if value else ""
    return ""


def real_ip(
    remote_addr: str, headers: Optional[Mapping[str, HeaderValue]] = None
) -> str:
    """Return the client address of a request.

    A public remote address is returned as is; otherwise the first public
    address in ``X-Forwarded-For`` is used, falling back to the remote one.
    """
    remote = remote_addr.split(":")[0]
    if not is_inner_ip(remote):
        return remote
    forwarded = _header(headers, "X-Forwarded-For")
    if forwarded:
        found = get_global_ip_from_xforwarded_for(forwarded)
        if found:
            return found
    return remote


def check_ip(ip: str) -> bool:
    """Return whether ``ip`` is a well-formed IPv4 or IPv6 address."""
    if "%" in ip:
        return False
    try:
        ipaddress.ip_address(ip)
    except ValueError:
        return False
    return True


def _atoi(text: str) -> int:
    return int(text) if _ATOI.fullmatch(text) else 0


def inet_aton(ip: str) -> int:
    """Pack a dotted IPv4 address into an integer; unparsable parts count as 0."""
    parts = ip.split(".")
    if len(parts) < 4:
        raise ValueError(f"not a dotted IPv4 address: {ip!r}")
    b0, b1, b2, b3 = (_atoi(part) for part in parts[:4])
    return (b0 << 24) + (b1 << 16) + (b2 << 8) + b3


def inet_ntoa(number: int) -> ipaddress.IPv4Address:
    """Unpack the low 32 bits of ``number`` into an IPv4 address."""
    return ipaddress.IPv4Address(number & 0xFFFFFFFF)


_INNER_RANGES = (
    (inet_aton("10.255.255.255"), 24),
    (inet_aton("172.16.255.255"), 20),
    (inet_aton("192.168.255.255"), 16),
    (inet_aton("100.64.255.255"), 22),
    (inet_aton("127.255.255.255"), 24),
)


def is_inner_ip(ip: str) -> bool:
    """Return whether ``ip`` is private, shared (100.64/10) or loopback.

    Malformed addresses are not inner; IPv6 addresses raise ``ValueError``.
    """
    if not check_ip(ip):
        return False
    number = inet_aton(ip)
    return any(number >> shift == bound >> shift for bound, shift in _INNER_RANGES)


def get_global_ip_from_xforwarded_for(value: str) -> str:
    """Return the first non-inner address in an X-Forwarded-For list, or ``""``."""
    for candidate in (part.strip() for part in value.split(",")):
        if not is_inner_ip(candidate):
            return candidate
    return ""