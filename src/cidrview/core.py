"""
Core CIDR calculation.

Parses a CIDR string and derives masks, first/last address, address
count and classification tags for it.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Callable

from netaddr import AddrFormatError, IPAddress, IPNetwork

logger = logging.getLogger(__name__)

# <address>/<decimal prefix>, nothing else; leading zeros allowed
CIDR_PATTERN = re.compile(r"([0-9A-Fa-f:.]+)/([0-9]+)")

# IPv4-mapped IPv6 prefix length (::ffff:0:0/96)
IPV4_MAPPED_PREFIXLEN = 96

LINK_LOCAL_MULTICAST_V4 = IPNetwork("224.0.0.0/24")
MULTICAST_V6 = IPNetwork("ff00::/8")
LIMITED_BROADCAST = IPAddress("255.255.255.255")

# IPv6 multicast scope values (RFC 4291 section 2.7)
SCOPE_INTERFACE_LOCAL = 0x1
SCOPE_LINK_LOCAL = 0x2


class ParseError(ValueError):
    """Raised when a string is not valid CIDR notation."""

    def __init__(self, cidr: str, reason: str | None = None):
        self.cidr = cidr
        self.reason = reason
        message = f"invalid CIDR address: {cidr!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


@dataclass(frozen=True)
class Result:
    """Everything derived from one CIDR."""
    ip: bytes
    is_v6: bool
    ip_bits: int
    network: bytes
    net_mask: bytes
    net_mask_size: int
    host_mask: bytes
    host_mask_size: int
    max: bytes
    ip_count: int
    tags: tuple[str, ...]

    @property
    def version(self) -> int:
        return 6 if self.is_v6 else 4

    def to_dict(self) -> dict[str, Any]:
        return {
            "ip": format_address(self.ip),
            "version": self.version,
            "ip_bits": self.ip_bits,
            "network": format_address(self.network),
            "net_mask": format_address(self.net_mask),
            "net_mask_size": self.net_mask_size,
            "host_mask": format_address(self.host_mask),
            "host_mask_size": self.host_mask_size,
            "max": format_address(self.max),
            # Decimal string: 2^128 does not fit a JSON number for most consumers
            "ip_count": str(self.ip_count),
            "tags": list(self.tags),
        }


def _scope(ip: IPAddress) -> int:
    """Scope nibble of an IPv6 multicast address."""
    return (int(ip) >> 112) & 0xF


def is_loopback(ip: IPAddress) -> bool:
    return ip.is_loopback()


def is_multicast(ip: IPAddress) -> bool:
    return ip.is_multicast()


def is_link_local_multicast(ip: IPAddress) -> bool:
    if ip.version == 4:
        return ip in LINK_LOCAL_MULTICAST_V4
    return ip in MULTICAST_V6 and _scope(ip) == SCOPE_LINK_LOCAL


def is_interface_local_multicast(ip: IPAddress) -> bool:
    return ip.version == 6 and ip in MULTICAST_V6 and _scope(ip) == SCOPE_INTERFACE_LOCAL


def is_link_local_unicast(ip: IPAddress) -> bool:
    return ip.is_link_local()


def is_unspecified(ip: IPAddress) -> bool:
    return int(ip) == 0


def is_global_unicast(ip: IPAddress) -> bool:
    """Check if an address is global unicast.

    This is broader than "publicly routable": private ranges count as
    global unicast too.
    """
    return not (
        ip == LIMITED_BROADCAST
        or is_unspecified(ip)
        or is_loopback(ip)
        or is_multicast(ip)
        or is_link_local_unicast(ip)
    )


# Evaluated in order; a None label means the check runs but adds no tag.
CLASSIFIERS: list[tuple[str | None, Callable[[IPAddress], bool]]] = [
    ("loopback", is_loopback),
    ("multicast", is_multicast),
    ("link local multicast", is_link_local_multicast),
    ("interface local multicast", is_interface_local_multicast),
    (None, is_global_unicast),
    ("link local unicast", is_link_local_unicast),
    ("unspecified", is_unspecified),
]


def classify(ip: IPAddress) -> tuple[str, ...]:
    """Return classification tags for an address, in fixed order."""
    tags = []
    for label, predicate in CLASSIFIERS:
        if predicate(ip) and label is not None:
            tags.append(label)
    return tuple(tags)


def mask_complement(mask: bytes) -> bytes:
    """Invert every byte of a mask."""
    return bytes(~b & 0xFF for b in mask)


def max_address(network: bytes, mask: bytes) -> bytes:
    """Return the last address of a network (all host bits set).

    Bytes are aligned from the end, so a mask shorter than the network
    only touches the trailing bytes.
    """
    last = bytearray(network)
    for i in range(1, len(mask) + 1):
        last[-i] = network[-i] | (~mask[-i] & 0xFF)
    return bytes(last)


def format_address(packed: bytes) -> str:
    """Format raw address bytes (an address or a mask) as text."""
    version = 4 if len(packed) == 4 else 6
    return str(IPAddress(int.from_bytes(packed, "big"), version=version))


def parse_cidr(cidr: str) -> IPNetwork:
    """Parse CIDR notation into a netaddr network, keeping the host bits.

    IPv4-mapped IPv6 networks whose prefix covers the mapping prefix are
    returned as plain IPv4.
    """
    match = CIDR_PATTERN.fullmatch(cidr)
    if not match:
        raise ParseError(cidr)

    address, prefix = match.groups()
    try:
        ip = IPAddress(address)
    except (AddrFormatError, ValueError) as e:
        raise ParseError(cidr, str(e)) from e

    prefixlen = int(prefix)
    width = len(ip.packed) * 8
    if prefixlen > width:
        raise ParseError(cidr, f"prefix /{prefixlen} exceeds {width} bits")

    if ip.is_ipv4_mapped() and prefixlen >= IPV4_MAPPED_PREFIXLEN:
        ip = ip.ipv4()
        prefixlen -= IPV4_MAPPED_PREFIXLEN

    return IPNetwork(f"{ip}/{prefixlen}")


def calc(cidr: str) -> Result:
    """Calculate everything about a CIDR.

    Raises:
        ParseError: if ``cidr`` is not valid CIDR notation
    """
    net = parse_cidr(cidr)
    ip = net.ip

    ip_bits = len(ip.packed) * 8
    net_mask = net.netmask.packed
    net_mask_size = net.prefixlen
    host_mask = mask_complement(net_mask)
    host_mask_size = ip_bits - net_mask_size
    network = net.network.packed

    result = Result(
        ip=ip.packed,
        is_v6=ip.version == 6,
        ip_bits=ip_bits,
        network=network,
        net_mask=net_mask,
        net_mask_size=net_mask_size,
        host_mask=host_mask,
        host_mask_size=host_mask_size,
        max=max_address(network, net_mask),
        ip_count=1 << host_mask_size,
        tags=classify(ip),
    )
    logger.debug(
        "calc %s: network=%s/%d tags=%s",
        cidr, net.network, net_mask_size, list(result.tags),
    )
    return result
