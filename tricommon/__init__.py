"""
tricommon core package.

Generic, stateless helpers meant to be linked into larger host components:
clamping, memory-alignment checks, fixed-width bit operations, container
conveniences and level-gated console output.
"""

from tricommon.alignment import address_of, check_alignment, require_alignment
from tricommon.bits import bit_width, get_bit, set_bit
from tricommon.bounds import clamp_value, clamp_value_and_warn
from tricommon.console import conditional_error, conditional_print, format_conditional
from tricommon.containers import (
    check_all_strings_for_substring,
    get_keys,
    get_keys_and_values,
    is_subset,
    make_from_keys_and_values,
    retrieve_or_default,
    sets_equal,
)
from tricommon.exceptions import (
    AlignmentViolationError,
    BitPositionError,
    ConfigurationError,
    InvalidArgumentError,
    LengthMismatchError,
    ToolkitError,
    TypeConstraintViolationError,
)
from tricommon.utils.log_sinks import ListSink, LoggerSink, Sink, StreamSink

__version__ = "0.1.0"

__all__ = [
    "AlignmentViolationError",
    "BitPositionError",
    "ConfigurationError",
    "InvalidArgumentError",
    "LengthMismatchError",
    "ListSink",
    "LoggerSink",
    "Sink",
    "StreamSink",
    "ToolkitError",
    "TypeConstraintViolationError",
    "address_of",
    "bit_width",
    "check_alignment",
    "check_all_strings_for_substring",
    "clamp_value",
    "clamp_value_and_warn",
    "conditional_error",
    "conditional_print",
    "format_conditional",
    "get_bit",
    "get_keys",
    "get_keys_and_values",
    "is_subset",
    "make_from_keys_and_values",
    "require_alignment",
    "retrieve_or_default",
    "set_bit",
    "sets_equal",
]
