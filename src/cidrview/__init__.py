"""
cidrview - CIDR inspector

Computes the network mask, host mask, address range and classification
of a CIDR and draws it bit by bit.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

__version__ = "0.1.0"
__author__ = "DNS Science.io"
__copyright__ = "Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company"

from cidrview.core import (
    CLASSIFIERS,
    ParseError,
    Result,
    calc,
    classify,
    format_address,
    mask_complement,
    max_address,
    parse_cidr,
)
from cidrview.render import binary, binary_octets, mask_line

__all__ = [
    "CLASSIFIERS",
    "ParseError",
    "Result",
    "calc",
    "classify",
    "format_address",
    "mask_complement",
    "max_address",
    "parse_cidr",
    "binary",
    "binary_octets",
    "mask_line",
]
