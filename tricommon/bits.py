# tricommon/bits.py
"""
Single-bit reads and writes on fixed-width unsigned integers.

Python ints have no fixed width, so the width is taken either from a ctypes
unsigned type (`c_uint8` ... `c_uint64`) or from an explicit `width`
argument. Anything else is rejected before any bit is touched.
"""
import ctypes
from typing import Dict, Optional, TypeVar, Union

from tricommon.exceptions import BitPositionError, TypeConstraintViolationError

FIXED_WIDTHS = (8, 16, 32, 64)

# c_uint64 is an alias of c_ulong (or c_ulonglong) depending on platform.
CTYPES_WIDTHS: Dict[type, int] = {
    ctypes.c_uint8: 8,
    ctypes.c_uint16: 16,
    ctypes.c_uint32: 32,
    ctypes.c_uint64: 64,
}

FixedWidthUnsigned = Union[
    int, ctypes.c_uint8, ctypes.c_uint16, ctypes.c_uint32, ctypes.c_uint64
]
U = TypeVar("U", int, ctypes.c_uint8, ctypes.c_uint16, ctypes.c_uint32, ctypes.c_uint64)


def bit_width(current: FixedWidthUnsigned, width: Optional[int] = None) -> int:
    """Resolves the bit width of a fixed-width unsigned value.

    :param current: A ctypes unsigned instance, or a non-negative int.
    :param width: Required for plain ints; must be 8, 16, 32 or 64.
    :return: The width in bits.
    :rtype: int
    :raises TypeConstraintViolationError: If `current` is not a fixed-width
        unsigned value.
    """
    ctype_width = CTYPES_WIDTHS.get(type(current))
    if ctype_width is not None:
        if width is not None and width != ctype_width:
            raise TypeConstraintViolationError(
                f"{type(current).__name__} is {ctype_width} bits wide, not {width}"
            )
        return ctype_width

    if isinstance(current, bool) or not isinstance(current, int):
        raise TypeConstraintViolationError(
            f"Type must be a fixed-size unsigned integral type, got {type(current).__name__}"
        )
    if width not in FIXED_WIDTHS:
        raise TypeConstraintViolationError(
            f"Plain ints need a width in {FIXED_WIDTHS}, got {width!r}"
        )
    if not 0 <= current < (1 << width):
        raise TypeConstraintViolationError(
            f"Value {current} does not fit in an unsigned {width}-bit integer"
        )
    return width


def _raw(current: FixedWidthUnsigned) -> int:
    return current if isinstance(current, int) else current.value


def _rewrap(template: FixedWidthUnsigned, raw: int):
    if isinstance(template, int):
        return raw
    return type(template)(raw)


def _zero_like(template: FixedWidthUnsigned):
    return _rewrap(template, 0)


def set_bit(
    current: U, bit_position: int, bit_value: bool, width: Optional[int] = None
) -> U:
    """Returns `current` with one bit set or cleared.

    :param current: The value to update; not modified in place.
    :param bit_position: Index of the bit, 0 being the least significant.
    :param bit_value: Set the bit when truthy, clear it otherwise.
    :param width: Bit width for plain ints (8, 16, 32 or 64).
    :return: The updated value, of the same kind as `current`.
    :raises TypeConstraintViolationError: If `current` is not fixed-width unsigned.
    :raises BitPositionError: If `bit_position` is outside `[0, width)`.
    """
    resolved_width = bit_width(current, width)
    if (
        isinstance(bit_position, bool)
        or not isinstance(bit_position, int)
        or not 0 <= bit_position < resolved_width
    ):
        raise BitPositionError(bit_position, resolved_width)

    update_mask = 1 << bit_position
    raw = _raw(current)
    if bit_value:
        raw |= update_mask
    else:
        raw &= ~update_mask & ((1 << resolved_width) - 1)
    return _rewrap(current, raw)


def get_bit(
    current: FixedWidthUnsigned, bit_position: int, width: Optional[int] = None
) -> bool:
    """Returns True if bit `bit_position` of `current` is set.

    The mask is built by `set_bit` on a zero of the same kind, so both share
    the position check.
    """
    bit_width(current, width)
    mask = set_bit(_zero_like(current), bit_position, True, width)
    return (_raw(mask) & _raw(current)) > 0

