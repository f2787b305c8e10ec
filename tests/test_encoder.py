"""Tests for the '<descriptor>#<checksum>' string form."""

import pytest

from descriptor_checksum.checksum import add_checksum, is_valid, split_checksum, verify_checksum
from descriptor_checksum.utils.exceptions import (
    ChecksumError,
    ChecksumMismatchError,
    InvalidChecksumFormatError,
    InvalidDescriptorCharacterError,
    MissingChecksumError,
)


DESCRIPTOR = "addr(tb1qdu05evh9kw0w482lfl2ktxm6ylp060kmqpe5js)"
CHECKSUMMED = DESCRIPTOR + "#n0s7nyz0"


def test_add_checksum():
    assert add_checksum(DESCRIPTOR) == CHECKSUMMED


def test_add_checksum_is_idempotent():
    assert add_checksum(CHECKSUMMED) == CHECKSUMMED


def test_add_checksum_rejects_wrong_existing_suffix():
    with pytest.raises(ChecksumMismatchError):
        add_checksum(DESCRIPTOR + "#n0s7nyz2")


def test_split_checksum():
    assert split_checksum(CHECKSUMMED) == (DESCRIPTOR, "n0s7nyz0")
    assert split_checksum(DESCRIPTOR) == (DESCRIPTOR, None)


@pytest.mark.parametrize("suffix", ["", "n0s7nyz", "n0s7nyz0q", "N0S7NYZ0", "n0s7nyb0"])
def test_split_checksum_bad_suffix(suffix):
    with pytest.raises(InvalidChecksumFormatError):
        split_checksum(DESCRIPTOR + "#" + suffix)


def test_split_checksum_multiple_separators():
    with pytest.raises(InvalidChecksumFormatError):
        split_checksum(CHECKSUMMED + "#n0s7nyz0")


def test_verify_checksum():
    assert verify_checksum(CHECKSUMMED) == DESCRIPTOR
    assert verify_checksum(CHECKSUMMED, require_checksum=True) == DESCRIPTOR


def test_verify_checksum_mismatch():
    with pytest.raises(ChecksumMismatchError) as excinfo:
        verify_checksum(DESCRIPTOR + "#n0s7nyz2")

    assert excinfo.value.expected == "n0s7nyz0"
    assert excinfo.value.actual == "n0s7nyz2"


def test_verify_checksum_error_in_payload():
    tampered = CHECKSUMMED.replace("tb1q", "tb1p", 1)
    with pytest.raises(ChecksumMismatchError):
        verify_checksum(tampered)


def test_verify_without_checksum():
    assert verify_checksum(DESCRIPTOR) == DESCRIPTOR

    with pytest.raises(MissingChecksumError):
        verify_checksum(DESCRIPTOR, require_checksum=True)


def test_verify_without_checksum_still_checks_charset():
    with pytest.raises(InvalidDescriptorCharacterError):
        verify_checksum("addr(é)")


def test_checksum_errors_share_base_class():
    for exc in (ChecksumMismatchError("a", "b"), InvalidChecksumFormatError(), MissingChecksumError()):
        assert isinstance(exc, ChecksumError)


def test_is_valid():
    assert is_valid(CHECKSUMMED)
    assert is_valid(DESCRIPTOR)
    assert not is_valid(DESCRIPTOR, require_checksum=True)
    assert not is_valid(DESCRIPTOR + "#n0s7nyz2")
    assert not is_valid(DESCRIPTOR + "#")
    assert not is_valid("addr(é)#n0s7nyz0")
