"""
Map Python exceptions to API error codes.
"""

from typing import Tuple

from fastapi.exceptions import RequestValidationError

from descriptor_checksum.utils.exceptions import (
    InvalidDescriptorCharacterError,
    ChecksumMismatchError,
    InvalidChecksumFormatError,
    MissingChecksumError,
    DescriptorChecksumException,
)


ERROR_INVALID_REQUEST = 0x400  # 1024
ERROR_INVALID_CHARACTER = 0x401  # 1025
ERROR_CHECKSUM_MISMATCH = 0x402  # 1026
ERROR_INVALID_CHECKSUM_FORMAT = 0x403  # 1027
ERROR_MISSING_CHECKSUM = 0x404  # 1028
ERROR_DESCRIPTOR = 0x4FF  # 1279
ERROR_INTERNAL = 0x500  # 1280


def map_exception(exception: Exception) -> Tuple[int, str]:
    """
    Map exception to error code and message.

    Args:
        exception: Python exception.

    Returns:
        Tuple of (ErrorNumber, ErrorMessage).
    """
    if isinstance(exception, RequestValidationError):
        errors = [
            f"{' -> '.join(str(x) for x in error['loc'])}: {error['msg']}"
            for error in exception.errors()
        ]
        return (ERROR_INVALID_REQUEST, "Invalid request: " + "; ".join(errors))

    if isinstance(exception, InvalidDescriptorCharacterError):
        return (ERROR_INVALID_CHARACTER, str(exception))

    if isinstance(exception, ChecksumMismatchError):
        return (ERROR_CHECKSUM_MISMATCH, str(exception))

    if isinstance(exception, InvalidChecksumFormatError):
        return (ERROR_INVALID_CHECKSUM_FORMAT, str(exception))

    if isinstance(exception, MissingChecksumError):
        return (ERROR_MISSING_CHECKSUM, str(exception))

    if isinstance(exception, DescriptorChecksumException):
        return (ERROR_DESCRIPTOR, str(exception))

    return (ERROR_INTERNAL, f"Internal error: {type(exception).__name__}: {exception}")
