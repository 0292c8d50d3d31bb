# tricommon/alignment.py
"""
Memory-alignment inspection for Python objects.

The address checked is always the one backing the caller's object, never a
copy: ctypes instances report their buffer address, array-interface objects
(numpy arrays and similar) their data pointer, writable buffers the address of
their first byte. Read-only buffers (`bytes`) and objects without raw
storage fall back to the CPython object address.
"""
import ctypes
from typing import Any, Optional

from tricommon.exceptions import AlignmentViolationError, InvalidArgumentError
from tricommon.utils.log_sinks import STDOUT, Sink
from tricommon.utils.logger import setup_logger

logger = setup_logger(__name__)


def _buffer_address(item: Any) -> Optional[int]:
    try:
        with memoryview(item) as view:
            readonly, nbytes = view.readonly, view.nbytes
    except TypeError:
        return None
    if readonly or nbytes == 0:
        return None
    try:
        char_array = (ctypes.c_char * nbytes).from_buffer(item)
    except (TypeError, ValueError, BufferError):
        # Non-contiguous exports cannot be mapped onto a flat ctypes array.
        return None
    address = ctypes.addressof(char_array)
    # Drop the export right away so resizable buffers stay resizable.
    del char_array
    return address


def address_of(item: Any) -> int:
    """Returns the numeric address of the storage behind `item`.

    :param item: Any Python object.
    :return: The storage address as an integer.
    :rtype: int
    """
    try:
        return ctypes.addressof(item)
    except TypeError:
        pass  # not a ctypes instance

    array_interface = getattr(item, "__array_interface__", None)
    if isinstance(array_interface, dict) and array_interface.get("data"):
        return int(array_interface["data"][0])

    address = _buffer_address(item)
    if address is not None:
        return address

    logger.debug(f"No raw storage for {type(item).__name__}; using object address")
    return id(item)


def _validate_alignment(desired_alignment: int) -> None:
    if (
        isinstance(desired_alignment, bool)
        or not isinstance(desired_alignment, int)
        or desired_alignment <= 0
    ):
        raise InvalidArgumentError(
            f"Alignment must be a positive integer, got {desired_alignment!r}"
        )


def check_alignment(
    item: Any,
    desired_alignment: int,
    verbose: bool = False,
    sink: Optional[Sink] = None,
) -> bool:
    """Checks whether `item` lives at a multiple of `desired_alignment` bytes.

    :param item: The object whose storage address is inspected.
    :type item: Any
    :param desired_alignment: Required alignment in bytes; must be positive.
    :type desired_alignment: int
    :param verbose: Report the address and the outcome, aligned or not.
    :type verbose: bool
    :param sink: Destination for the verbose line; defaults to stdout.
    :type sink: Optional[Sink]
    :return: True if the address is a multiple of `desired_alignment`.
    :rtype: bool
    :raises InvalidArgumentError: If `desired_alignment` is not a positive int.
    """
    _validate_alignment(desired_alignment)
    address = address_of(item)
    aligned = address % desired_alignment == 0
    if verbose:
        verdict = "aligned" if aligned else "NOT aligned"
        (STDOUT if sink is None else sink).emit(
            f"Item @ {address} {verdict} to {desired_alignment} bytes"
        )
    return aligned


def require_alignment(item: Any, desired_alignment: int) -> None:
    """Raises `AlignmentViolationError` unless `item` is suitably aligned.

    Produces no output on success.
    """
    _validate_alignment(desired_alignment)
    address = address_of(item)
    if address % desired_alignment != 0:
        raise AlignmentViolationError(address, desired_alignment)
