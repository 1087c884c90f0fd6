"""IPv4 subnet calculator with an HTML form, JSON API and health endpoints."""

from .calculator import (
    InvalidCIDRError,
    InvalidIPAddressError,
    InvalidMaskFormatError,
    NonContiguousMaskError,
    SubnetError,
    calculate_subnet,
    parse_subnet_mask,
)
from .config import VERSION as __version__
from .models.subnet import SubnetResult

__all__ = [
    "__version__",
    "InvalidCIDRError",
    "InvalidIPAddressError",
    "InvalidMaskFormatError",
    "NonContiguousMaskError",
    "SubnetError",
    "SubnetResult",
    "calculate_subnet",
    "parse_subnet_mask",
]
