"""Tests for the FMV to FM2 controller bit permutation."""

import pytest

from fmv2fm2.formats.bits import (
    DESTINATION_BIT_TABLE,
    PERMUTATION_TABLE,
    build_permutation_table,
    remap_byte,
    remap_bytes,
)
from fmv2fm2.models import Fm2Button, FmvButton


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        (0x00, 0x00),
        (0xFF, 0xFF),
        (0x01, 0x80),
        (0x02, 0x40),
        (0x04, 0x10),
        (0x08, 0x20),
        (0x10, 0x02),
        (0x20, 0x01),
        (0x40, 0x04),
        (0x80, 0x08),
    ],
)
def test_known_vectors(source, expected):
    """Test single-bit and boundary values."""
    assert remap_byte(source) == expected


def test_table_size():
    """Test the lookup table covers every byte value."""
    assert len(PERMUTATION_TABLE) == 256


def test_table_is_bijective():
    """Test no two source bytes map to the same destination byte."""
    assert sorted(PERMUTATION_TABLE) == list(range(256))


def test_table_matches_bit_mapping():
    """Test every entry is the OR of the mapped single bits."""
    for value in range(256):
        expected = 0
        for bit, destination in enumerate(DESTINATION_BIT_TABLE):
            if value & (1 << bit):
                expected |= 1 << destination
        assert PERMUTATION_TABLE[value] == expected


def test_remap_is_position_independent():
    """Test the same byte remaps identically wherever it appears."""
    data = bytes([0x21, 0x00, 0x21, 0x21, 0xFF, 0x21])
    remapped = remap_bytes(data)
    assert remapped == bytes(remap_byte(b) for b in data)
    assert {remapped[i] for i in (0, 2, 3, 5)} == {0x81}


def test_buttons_keep_their_meaning():
    """Test each FMV button lands on the FM2 button of the same name."""
    for button in FmvButton:
        assert remap_byte(button.value) == Fm2Button[button.name].value


def test_build_rejects_non_permutation():
    """Test a mapping that loses a bit is rejected."""
    with pytest.raises(ValueError):
        build_permutation_table([0, 0, 1, 2, 3, 4, 5, 6])


def test_identity_table():
    """Test an identity mapping produces an identity table."""
    assert build_permutation_table(range(8)) == bytes(range(256))
