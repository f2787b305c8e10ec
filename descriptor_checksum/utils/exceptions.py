"""
Custom exception classes for the descriptor checksum library.
"""

from typing import Optional


class DescriptorChecksumException(Exception):
    """Base exception for all descriptor checksum errors."""
    pass


class InvalidDescriptorCharacterError(DescriptorChecksumException):
    """Descriptor contains a character outside the input charset."""

    def __init__(self, character: str, position: Optional[int] = None):
        self.character = character
        self.position = position
        if position is None:
            message = f"Invalid descriptor character: {character!r}"
        else:
            message = f"Invalid descriptor character {character!r} at position {position}"
        super().__init__(message)


class ChecksumError(DescriptorChecksumException):
    """Checksum suffix could not be verified."""
    pass


class ChecksumMismatchError(ChecksumError):
    """Checksum suffix does not match the descriptor."""

    def __init__(self, expected: str, actual: str):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Checksum mismatch: expected {expected}, got {actual}")


class InvalidChecksumFormatError(ChecksumError):
    """Checksum suffix is malformed (wrong length, bad charset, several '#')."""
    pass


class MissingChecksumError(ChecksumError):
    """Descriptor has no checksum suffix but one is required."""
    pass


class AddressValidatorError(DescriptorChecksumException):
    """
    Base class for errors raised by address validators.

    Raising one of these from AddressValidator.validate() vetoes the
    address being generated.
    """

    kind = "message"


class UserRejectedError(AddressValidatorError):
    """The user refused the address (e.g. on a hardware wallet screen)."""

    kind = "user_rejected"


class ValidatorConnectionError(AddressValidatorError):
    """Validator could not reach its device or backend."""

    kind = "connection_error"


class ValidatorTimeoutError(AddressValidatorError):
    """Validator did not answer in time."""

    kind = "timeout_error"


class InvalidScriptError(AddressValidatorError):
    """Validator considers the output script invalid."""

    kind = "invalid_script"


class ValidatorMessageError(AddressValidatorError):
    """Free-form validator failure."""

    kind = "message"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
