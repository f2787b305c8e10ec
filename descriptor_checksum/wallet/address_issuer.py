"""
Address issuance with validator polling.

The issuer owns a checksummed descriptor and a derivation index per keychain.
Script derivation itself is delegated to a caller-provided function.
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List

from descriptor_checksum.checksum.encoder import add_checksum, split_checksum, verify_checksum
from descriptor_checksum.wallet.address_validator import (
    AddressValidator,
    AddressValidatorError,
    HDKeyPaths,
    ScriptType,
)


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DerivedScript:
    """Output of a derivation function."""
    script: bytes
    hd_keypaths: HDKeyPaths = field(default_factory=dict)


@dataclass(frozen=True)
class IssuedAddress:
    """An address that passed every attached validator."""
    script_type: ScriptType
    index: int
    script: bytes
    hd_keypaths: HDKeyPaths

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "script_type": self.script_type.value,
            "index": self.index,
            "script": self.script.hex(),
            "hd_keypaths": dict(self.hd_keypaths),
        }


DeriveFunc = Callable[[ScriptType, int], DerivedScript]


class AddressIssuer:
    """
    Generates addresses from a descriptor and polls validators for each one.

    Thread-safe: derivation indexes are advanced under a lock, so two
    concurrent callers never receive the same index.
    """

    def __init__(
        self,
        descriptor: str,
        derive: DeriveFunc,
        validators: Iterable[AddressValidator] = (),
        require_checksum: bool = False,
    ):
        """
        Initialize issuer.

        Args:
            descriptor: Descriptor, optionally with "#checksum" suffix.
            derive: Function (script_type, index) -> DerivedScript.
            validators: Validators to attach, polled in this order.
            require_checksum: Reject a descriptor without checksum suffix.

        Raises:
            ChecksumError: If the checksum suffix is missing (when required),
                malformed or wrong.
            InvalidDescriptorCharacterError: If the descriptor has invalid characters.
        """
        _, checksum = split_checksum(descriptor)
        if checksum is None and not require_checksum:
            self._descriptor = add_checksum(descriptor)
        else:
            verify_checksum(descriptor, require_checksum=require_checksum)
            self._descriptor = descriptor
        self._derive = derive
        self._validators: List[AddressValidator] = list(validators)
        self._next_index: Dict[ScriptType, int] = {t: 0 for t in ScriptType}
        self._lock = threading.Lock()
        self._validators_lock = threading.Lock()

    @property
    def descriptor(self) -> str:
        """Descriptor with checksum suffix."""
        return self._descriptor

    @property
    def validators(self) -> List[AddressValidator]:
        """Attached validators, in polling order."""
        with self._validators_lock:
            return list(self._validators)

    def add_address_validator(self, validator: AddressValidator) -> None:
        """
        Attach a validator; it is polled after those already attached.

        A validator attached while an address is being issued is first
        polled for the next address.
        """
        with self._validators_lock:
            self._validators.append(validator)
        logger.debug(f"Attached address validator: {type(validator).__name__}")

    def next_index(self, script_type: ScriptType) -> int:
        """Index the next address of this keychain will be derived at."""
        return self._next_index[script_type]

    def get_new_address(self) -> IssuedAddress:
        """Generate the next external (receive) address."""
        return self._issue(ScriptType.EXTERNAL)

    def get_change_address(self) -> IssuedAddress:
        """Generate the next internal (change) address."""
        return self._issue(ScriptType.INTERNAL)

    def _issue(self, script_type: ScriptType) -> IssuedAddress:
        """
        Derive the next address and poll every validator.

        Raises:
            AddressValidatorError: First error raised by a validator. Validators
                after the failing one are not polled and the index is not consumed.
        """
        with self._lock:
            index = self._next_index[script_type]
            derived = self._derive(script_type, index)

            self._poll_validators(script_type, derived)

            self._next_index[script_type] = index + 1

        logger.info(f"Issued {script_type.value} address at index {index}")
        return IssuedAddress(
            script_type=script_type,
            index=index,
            script=derived.script,
            hd_keypaths=derived.hd_keypaths,
        )

    def _poll_validators(self, script_type: ScriptType, derived: DerivedScript) -> None:
        for validator in self.validators:
            try:
                validator.validate(script_type, derived.hd_keypaths, derived.script)
            except AddressValidatorError as e:
                logger.warning(f"Address rejected by {type(validator).__name__}: {e}")
                raise

