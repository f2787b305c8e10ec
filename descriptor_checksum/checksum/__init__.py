"""
Checksum package for output descriptors.
"""

from descriptor_checksum.checksum.charset import (
    INPUT_CHARSET,
    CHECKSUM_CHARSET,
    CHECKSUM_LENGTH,
)
from descriptor_checksum.checksum.checksum import poly_mod, compute_checksum
from descriptor_checksum.checksum.encoder import (
    split_checksum,
    verify_checksum,
    add_checksum,
    is_valid,
)

__all__ = [
    "INPUT_CHARSET",
    "CHECKSUM_CHARSET",
    "CHECKSUM_LENGTH",
    "poly_mod",
    "compute_checksum",
    "split_checksum",
    "verify_checksum",
    "add_checksum",
    "is_valid",
]
