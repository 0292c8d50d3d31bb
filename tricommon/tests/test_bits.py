# tricommon/tests/test_bits.py
"""
Tests for single-bit operations on fixed-width unsigned integers.
"""
import ctypes

import pytest

from tricommon.bits import bit_width, get_bit, set_bit
from tricommon.exceptions import (
    BitPositionError,
    InvalidArgumentError,
    TypeConstraintViolationError,
)

UNSIGNED_TYPES = [
    (ctypes.c_uint8, 8),
    (ctypes.c_uint16, 16),
    (ctypes.c_uint32, 32),
    (ctypes.c_uint64, 64),
]


def test_set_bit_uint8_example():
    """Verify setting bit 3 of a zero byte yields 8."""
    result = set_bit(ctypes.c_uint8(0), 3, True)
    assert isinstance(result, ctypes.c_uint8)
    assert result.value == 8
    assert get_bit(result, 3) is True


def test_set_bit_plain_int_example():
    """Verify plain ints work when a width is supplied."""
    assert set_bit(0, 3, True, width=8) == 8
    assert get_bit(8, 3, width=8) is True
    assert get_bit(8, 2, width=8) is False


@pytest.mark.parametrize("ctype, width", UNSIGNED_TYPES)
def test_bit_width_from_ctypes(ctype, width):
    """Verify the width is taken from the ctypes type."""
    assert bit_width(ctype(0)) == width


@pytest.mark.parametrize("ctype, width", UNSIGNED_TYPES)
def test_set_then_get_every_position(ctype, width):
    """Verify a set bit reads back as set and a cleared bit as cleared."""
    all_ones = (1 << width) - 1
    for pos in range(width):
        assert get_bit(set_bit(ctype(0), pos, True), pos) is True
        assert get_bit(set_bit(ctype(all_ones), pos, False), pos) is False


@pytest.mark.parametrize("ctype, width", UNSIGNED_TYPES)
def test_set_bit_leaves_other_bits_alone(ctype, width):
    """Verify only the targeted bit changes."""
    original = 0xA5A5A5A5A5A5A5A5 & ((1 << width) - 1)
    for pos in range(width):
        for bit_value in (True, False):
            updated = set_bit(ctype(original), pos, bit_value).value
            assert (updated ^ original) & ~(1 << pos) == 0


@pytest.mark.parametrize("ctype, width", UNSIGNED_TYPES)
def test_clearing_top_bit(ctype, width):
    """Verify clearing the most significant bit stays within the type's range."""
    all_ones = (1 << width) - 1
    result = set_bit(ctype(all_ones), width - 1, False)
    assert result.value == all_ones >> 1


def test_get_bit_high_bits_of_64_bit_value():
    """Verify bits above 31 of a 64-bit value are read correctly."""
    value = ctypes.c_uint64(1 << 63 | 1 << 40)
    assert get_bit(value, 63) is True
    assert get_bit(value, 40) is True
    assert get_bit(value, 39) is False


def test_set_bit_does_not_mutate_input():
    """Verify the ctypes argument is left untouched."""
    original = ctypes.c_uint16(0)
    set_bit(original, 5, True)
    assert original.value == 0


@pytest.mark.parametrize("ctype, width", UNSIGNED_TYPES)
def test_position_out_of_range(ctype, width):
    """Verify positions outside [0, width) raise BitPositionError."""
    with pytest.raises(BitPositionError, match=f"out of range for {width}-bit value") as exc_info:
        set_bit(ctype(0), width, True)
    assert exc_info.value.bit_position == width
    assert exc_info.value.width == width

    with pytest.raises(BitPositionError):
        get_bit(ctype(0), -1)


def test_bit_position_error_is_invalid_argument():
    """Verify position errors belong to the invalid-argument family."""
    with pytest.raises(InvalidArgumentError):
        set_bit(0, 8, True, width=8)
    with pytest.raises(IndexError):
        get_bit(0, 70, width=64)


@pytest.mark.parametrize(
    "value, width",
    [
        (ctypes.c_int8(0), None),
        (ctypes.c_int32(0), None),
        (1.0, 8),
        (True, 8),
        ("1", 8),
        (5, None),
        (5, 12),
        (-1, 8),
        (256, 8),
    ],
)
def test_type_constraint_violations(value, width):
    """Verify anything but a fixed-width unsigned value is rejected."""
    with pytest.raises(TypeConstraintViolationError):
        set_bit(value, 0, True, width=width)
    with pytest.raises(TypeConstraintViolationError):
        get_bit(value, 0, width=width)


def test_ctypes_width_conflict():
    """Verify an explicit width must agree with the ctypes type."""
    with pytest.raises(TypeConstraintViolationError, match="is 8 bits wide"):
        set_bit(ctypes.c_uint8(0), 0, True, width=16)


def test_type_constraint_is_type_error():
    """Verify callers catching TypeError also catch type constraint failures."""
    with pytest.raises(TypeError):
        get_bit(3.5, 0)
