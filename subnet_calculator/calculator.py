"""IPv4 subnet calculations.

Parses subnet masks in CIDR (``/24``) or dotted-decimal (``255.255.255.0``)
notation and derives network, broadcast and usable host addresses for an IPv4
address. Every function here is a pure function of its arguments, so callers
(web handlers, tests) may invoke them concurrently without coordination.

Corner cases:
- /32: single host, network and broadcast echo the entered address
- /31: RFC 3021 point-to-point link, reported with no usable hosts
"""

import logging
import re
from ipaddress import IPv4Address

from .models.subnet import SubnetResult

logger = logging.getLogger(__name__)

ALL_ONES = 0xFFFFFFFF
NOT_APPLICABLE = "N/A"

# Decimal integer with optional sign, no whitespace or digit separators
_CIDR_PREFIX = re.compile(r"[+-]?[0-9]+")


class SubnetError(ValueError):
    """Base class for rejected subnet calculator input."""


class InvalidCIDRError(SubnetError):
    """CIDR prefix is not an integer in the range 0-32."""


class InvalidMaskFormatError(SubnetError):
    """Dotted-decimal mask does not parse as an IPv4 literal."""


class NonContiguousMaskError(SubnetError):
    """Mask bits are not a contiguous run of ones followed by zeros."""


class InvalidIPAddressError(SubnetError):
    """Address does not parse as an IPv4 literal."""


def cidr_mask(prefix: int) -> bytes:
    """Return the 4-byte mask with the top ``prefix`` bits set."""
    return ((ALL_ONES << (32 - prefix)) & ALL_ONES).to_bytes(4, "big")


def prefix_length(mask: bytes) -> int:
    """Count the leading one-bits of a 4-byte mask."""
    inverted = ~int.from_bytes(mask, "big") & ALL_ONES
    return 32 - inverted.bit_length()


def is_valid_subnet_mask(mask: bytes) -> bool:
    """Check that a 4-byte mask is leading ones followed only by zeros."""
    if len(mask) != 4:
        return False
    return mask == cidr_mask(prefix_length(mask))


def parse_subnet_mask(mask: str) -> bytes:
    """Parse a subnet mask in CIDR or dotted-decimal notation.

    Args:
        mask: ``/<0-32>`` or a dotted-decimal mask such as ``255.255.255.0``.
            Surrounding whitespace is ignored.

    Returns:
        The mask as 4 big-endian bytes

    Raises:
        InvalidCIDRError: CIDR prefix is not an integer or outside 0-32
        InvalidMaskFormatError: dotted-decimal mask is not an IPv4 literal
        NonContiguousMaskError: dotted-decimal mask has holes
    """
    if not isinstance(mask, str):
        raise InvalidMaskFormatError(f"invalid subnet mask format: {mask!r}")

    mask = mask.strip()

    # CIDR notation (e.g. /24)
    if mask.startswith("/"):
        digits = mask[1:]
        if not _CIDR_PREFIX.fullmatch(digits):
            raise InvalidCIDRError(f"invalid CIDR notation: {mask}")
        try:
            prefix = int(digits)
        except ValueError as e:
            # Digit strings past the interpreter's int conversion limit
            raise InvalidCIDRError(f"invalid CIDR notation: {mask}") from e
        if not 0 <= prefix <= 32:
            raise InvalidCIDRError(f"invalid CIDR notation: {mask}")
        return cidr_mask(prefix)

    # Dotted decimal notation (e.g. 255.255.255.0)
    try:
        packed = IPv4Address(mask).packed
    except ValueError as e:
        raise InvalidMaskFormatError(f"invalid subnet mask format: {mask}") from e

    if not is_valid_subnet_mask(packed):
        raise NonContiguousMaskError(
            f"invalid subnet mask: {mask} (must have contiguous 1s followed by 0s)"
        )

    return packed


def calculate_subnet(ip: str, mask: str) -> SubnetResult:
    """Calculate subnet information for an IPv4 address and mask.

    Args:
        ip: Dotted-decimal IPv4 address (e.g. 192.168.1.100)
        mask: Subnet mask in CIDR or dotted-decimal notation

    Returns:
        Network, broadcast and usable host range for the subnet

    Raises:
        InvalidIPAddressError: if the address is not a valid IPv4 literal
        SubnetError: any mask error raised by parse_subnet_mask
    """
    if not isinstance(ip, str):
        raise InvalidIPAddressError(f"invalid IP address: {ip!r}")

    try:
        address = IPv4Address(ip)
    except ValueError as e:
        raise InvalidIPAddressError(f"invalid IP address: {ip}") from e

    subnet_mask = parse_subnet_mask(mask)
    mask_int = int.from_bytes(subnet_mask, "big")
    prefix = prefix_length(subnet_mask)
    netmask = str(IPv4Address(subnet_mask))

    network = IPv4Address(int(address) & mask_int)
    broadcast = IPv4Address(int(network) | (~mask_int & ALL_ONES))

    logger.debug(
        "Calculating subnet",
        extra={"ip": str(address), "prefix_length": prefix},
    )

    if prefix == 32:
        # Single host, network = broadcast = entered address
        return SubnetResult(
            network_address=str(address),
            broadcast_address=str(address),
            min_host_address=NOT_APPLICABLE,
            max_host_address=NOT_APPLICABLE,
            usable_hosts="0",
            prefix_length=prefix,
            netmask=netmask,
        )

    if prefix == 31:
        # RFC 3021 point-to-point link
        return SubnetResult(
            network_address=str(network),
            broadcast_address=str(broadcast),
            min_host_address=NOT_APPLICABLE,
            max_host_address=NOT_APPLICABLE,
            usable_hosts="0",
            prefix_length=prefix,
            netmask=netmask,
        )

    # Total addresses minus network and broadcast
    usable_hosts = max(0, 2 ** (32 - prefix) - 2)

    return SubnetResult(
        network_address=str(network),
        broadcast_address=str(broadcast),
        min_host_address=str(network + 1),
        max_host_address=str(broadcast - 1),
        usable_hosts=str(usable_hosts),
        prefix_length=prefix,
        netmask=netmask,
    )
