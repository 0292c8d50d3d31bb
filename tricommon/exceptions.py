# tricommon/exceptions.py
"""
Defines custom exception classes for the tricommon toolkit.

Every failure raised by the toolkit derives from `ToolkitError`, so host code
can catch the whole family at once. Each concrete error also inherits from the
closest built-in exception (`ValueError`, `TypeError`, ...) so callers that
only know the standard hierarchy still handle them sensibly.
"""
from typing import Optional


class ToolkitError(Exception):
    """Base exception class for all custom errors raised by tricommon."""

    pass


class ConfigurationError(ToolkitError):
    """Raised when the toolkit configuration file cannot be parsed or validated."""

    pass


class InvalidArgumentError(ToolkitError, ValueError):
    """Raised when an argument is outside the domain an operation accepts.

    The most common trigger is a clamp call whose lower bound is greater than
    its upper bound. Inherits from `ValueError` for some backwards
    compatibility.
    """

    pass


class BitPositionError(InvalidArgumentError, IndexError):
    """Raised when a bit index does not fit inside the value's bit width."""

    def __init__(self, bit_position: int, width: int):
        super().__init__(
            f"Bit position {bit_position} out of range for {width}-bit value"
        )
        self.bit_position = bit_position
        self.width = width


class AlignmentViolationError(ToolkitError, RuntimeError):
    """Raised when an item's storage address is not a multiple of the
    required alignment.

    :ivar address: The numeric address that was inspected.
    :ivar alignment: The alignment in bytes that was required.
    """

    def __init__(self, address: int, alignment: int):
        super().__init__(
            f"Item @ {address} not aligned at desired alignment of {alignment} bytes"
        )
        self.address = address
        self.alignment = alignment


class TypeConstraintViolationError(ToolkitError, TypeError):
    """Raised when a bit operation receives something other than a fixed-width
    unsigned integer (8, 16, 32 or 64 bits).

    Inherits from `TypeError` for some backwards compatibility.
    """

    pass


class LengthMismatchError(InvalidArgumentError):
    """Raised when parallel key and value sequences differ in length."""

    def __init__(
        self,
        keys_length: int,
        values_length: int,
        message: Optional[str] = None,
    ):
        super().__init__(
            message
            or f"Got {keys_length} keys but {values_length} values; lengths must match"
        )
        self.keys_length = keys_length
        self.values_length = values_length
