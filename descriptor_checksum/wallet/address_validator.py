"""
Abstract interface for address validators.

Validators attached to an AddressIssuer are polled, in sequence, every time a
new address (external or change) is generated. Typical use is displaying the
address on a hardware wallet so the user can cross-check it, but a validator
may also just observe each new address.

To veto an address, validate() raises one of the AddressValidatorError
subclasses; the error is propagated unchanged to the caller that requested
the address.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Mapping

from descriptor_checksum.utils.exceptions import (
    AddressValidatorError,
    UserRejectedError,
    ValidatorConnectionError,
    ValidatorTimeoutError,
    InvalidScriptError,
    ValidatorMessageError,
)

__all__ = [
    "ScriptType",
    "HDKeyPaths",
    "AddressValidator",
    "AddressValidatorError",
    "UserRejectedError",
    "ValidatorConnectionError",
    "ValidatorTimeoutError",
    "InvalidScriptError",
    "ValidatorMessageError",
]


class ScriptType(Enum):
    """Keychain an address is generated from."""

    EXTERNAL = "external"
    INTERNAL = "internal"


# Derivation path (e.g. "m/84'/1'/0'/0/5") -> key fingerprint or identifier
HDKeyPaths = Mapping[str, str]


class AddressValidator(ABC):
    """Abstract base class for address validators."""

    @abstractmethod
    def validate(self, script_type: ScriptType, hd_keypaths: HDKeyPaths, script: bytes) -> None:
        """
        Validate or inspect a newly generated address.

        Args:
            script_type: Keychain the address comes from.
            hd_keypaths: Key paths used to derive the script.
            script: Output script of the address.

        Raises:
            AddressValidatorError: To reject the address.
        """
        pass
