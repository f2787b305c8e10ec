"""
Handling of the "<descriptor>#<checksum>" string form.
"""

import logging
from typing import Optional, Tuple

from descriptor_checksum.checksum.charset import CHECKSUM_LENGTH, is_checksum_string
from descriptor_checksum.checksum.checksum import compute_checksum
from descriptor_checksum.utils.exceptions import (
    ChecksumMismatchError,
    DescriptorChecksumException,
    InvalidChecksumFormatError,
    MissingChecksumError,
)


logger = logging.getLogger(__name__)

SEPARATOR = "#"


def split_checksum(text: str) -> Tuple[str, Optional[str]]:
    """
    Split a descriptor string into descriptor and checksum parts.

    Args:
        text: Descriptor, with or without "#checksum" suffix.

    Returns:
        Tuple of (descriptor, checksum). checksum is None when there is no suffix.

    Raises:
        InvalidChecksumFormatError: If there is more than one '#', or the
            suffix is not 8 characters of the checksum charset.

    Example:
        >>> split_checksum("raw(deadbeef)#89f8spxm")
        ('raw(deadbeef)', '89f8spxm')
    """
    parts = text.split(SEPARATOR)
    if len(parts) == 1:
        return text, None

    if len(parts) > 2:
        raise InvalidChecksumFormatError(f"Multiple '{SEPARATOR}' symbols in descriptor")

    descriptor, checksum = parts
    if len(checksum) != CHECKSUM_LENGTH:
        raise InvalidChecksumFormatError(
            f"Expected {CHECKSUM_LENGTH} character checksum, got {len(checksum)} characters"
        )
    if not is_checksum_string(checksum):
        raise InvalidChecksumFormatError(f"Checksum contains invalid characters: {checksum!r}")

    return descriptor, checksum


def verify_checksum(text: str, require_checksum: bool = False) -> str:
    """
    Verify the checksum suffix of a descriptor.

    Args:
        text: Descriptor, optionally followed by "#checksum".
        require_checksum: Fail if the suffix is absent.

    Returns:
        The descriptor without its checksum suffix.

    Raises:
        MissingChecksumError: If require_checksum is set and there is no suffix.
        InvalidChecksumFormatError: If the suffix is malformed.
        ChecksumMismatchError: If the suffix does not match.
        InvalidDescriptorCharacterError: If the descriptor has invalid characters.
    """
    descriptor, checksum = split_checksum(text)

    if checksum is None:
        if require_checksum:
            raise MissingChecksumError("Missing checksum")
        # Still reject characters the checksum could never cover
        compute_checksum(descriptor)
        return descriptor

    expected = compute_checksum(descriptor)
    if checksum != expected:
        raise ChecksumMismatchError(expected, checksum)

    logger.debug(f"Checksum verified: {checksum}")
    return descriptor


def add_checksum(descriptor: str) -> str:
    """
    Append "#checksum" to a descriptor.

    A descriptor that already carries a checksum is verified and returned
    unchanged.

    Example:
        >>> add_checksum("raw(deadbeef)")
        'raw(deadbeef)#89f8spxm'
    """
    if SEPARATOR in descriptor:
        verify_checksum(descriptor, require_checksum=True)
        return descriptor

    return f"{descriptor}{SEPARATOR}{compute_checksum(descriptor)}"


def is_valid(text: str, require_checksum: bool = False) -> bool:
    """
    Check a descriptor string without raising.

    Returns:
        True if verify_checksum() would succeed, False otherwise.
    """
    try:
        verify_checksum(text, require_checksum=require_checksum)
    except DescriptorChecksumException as e:
        logger.debug(f"Descriptor rejected: {e}")
        return False
    return True
