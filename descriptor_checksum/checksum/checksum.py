"""
Checksum calculation for output descriptors.

Implements the BCH code used by Bitcoin Core descriptors: every character is
fed as a 5-bit value, and the remaining class bits of each group of three
characters are packed into one extra symbol.
"""

import logging

from descriptor_checksum.checksum.charset import CHECKSUM_CHARSET, CHECKSUM_LENGTH, input_code
from descriptor_checksum.utils.exceptions import InvalidDescriptorCharacterError


logger = logging.getLogger(__name__)

GENERATOR = (0xF5DEE51989, 0xA9FDCA3312, 0x1BAB10E32D, 0x3706B1677A, 0x644D626FFD)


def poly_mod(c: int, val: int) -> int:
    """
    Feed one 5-bit symbol into the checksum state.

    Args:
        c: Current 40-bit state.
        val: Symbol value (0-31).

    Returns:
        Updated state.
    """
    c0 = c >> 35
    c = ((c & 0x7FFFFFFFF) << 5) ^ val
    for i in range(5):
        if (c0 >> i) & 1:
            c ^= GENERATOR[i]
    return c


def compute_checksum(descriptor: str) -> str:
    """
    Compute the 8-character checksum of a descriptor (without '#' suffix).

    Args:
        descriptor: Descriptor string, e.g. "wpkh(tpub.../0/*)".

    Returns:
        Checksum string of 8 characters from CHECKSUM_CHARSET.

    Raises:
        InvalidDescriptorCharacterError: If a character is not in INPUT_CHARSET.

    Example:
        >>> compute_checksum("addr(tb1qdu05evh9kw0w482lfl2ktxm6ylp060kmqpe5js)")
        'n0s7nyz0'
    """
    c = 1
    cls = 0
    clscount = 0

    for position, ch in enumerate(descriptor):
        pos = input_code(ch)
        if pos < 0:
            raise InvalidDescriptorCharacterError(ch, position)

        c = poly_mod(c, pos & 31)
        cls = cls * 3 + (pos >> 5)
        clscount += 1
        if clscount == 3:
            c = poly_mod(c, cls)
            cls = 0
            clscount = 0

    if clscount > 0:
        c = poly_mod(c, cls)

    for _ in range(CHECKSUM_LENGTH):
        c = poly_mod(c, 0)
    c ^= 1

    checksum = "".join(
        CHECKSUM_CHARSET[(c >> (5 * (7 - j))) & 31] for j in range(CHECKSUM_LENGTH)
    )
    logger.debug(f"Checksum of {len(descriptor)}-char descriptor: {checksum}")
    return checksum
