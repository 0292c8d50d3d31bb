# tricommon/bounds.py
"""
Clamping of orderable values into an inclusive range.
"""
from typing import Any, Optional, Protocol, TypeVar

from tricommon.exceptions import InvalidArgumentError
from tricommon.utils.log_sinks import STDERR, Sink


class _Orderable(Protocol):
    def __lt__(self, other: Any) -> bool:
        ...


T = TypeVar("T", bound=_Orderable)


def _check_bounds(min_val: T, max_val: T) -> None:
    if min_val > max_val:
        raise InvalidArgumentError(f"min > max ({min_val!r} > {max_val!r})")


def clamp_value(val: T, min_val: T, max_val: T) -> T:
    """Restricts `val` to the inclusive range `[min_val, max_val]`.

    :param val: The value to clamp.
    :param min_val: Lower bound.
    :param max_val: Upper bound.
    :return: `min_val` if `val` is below it, `max_val` if above, else `val`.
    :raises InvalidArgumentError: If `min_val > max_val`.
    """
    _check_bounds(min_val, max_val)
    return min(max_val, max(min_val, val))


def clamp_value_and_warn(
    val: T, min_val: T, max_val: T, sink: Optional[Sink] = None
) -> T:
    """Like `clamp_value`, but reports every clamp that actually happens.

    When `val` falls outside the range, a line naming the original value, the
    bound side and the bound value is written to `sink` (stderr by default).
    Nothing is written for in-range values.

    :raises InvalidArgumentError: If `min_val > max_val`; checked before any output.
    """
    _check_bounds(min_val, max_val)
    if sink is None:
        sink = STDERR
    if val < min_val:
        sink.emit(f"Clamping {val} to min {min_val}")
        return min_val
    if val > max_val:
        sink.emit(f"Clamping {val} to max {max_val}")
        return max_val
    return val
