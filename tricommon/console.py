# tricommon/console.py
"""
Level-gated console output.

A message carries its own importance (`msg_level`, lower is more important)
and is shown only when the caller's verbosity (`print_level`) is at least
that high. Lines are written through a sink, stdout or stderr by default.
"""
from typing import Optional

from tricommon.utils.log_sinks import STDERR, STDOUT, Sink


def format_conditional(msg: str, msg_level: int, print_level: int) -> str:
    """Renders a message as `[<msg_level>/<print_level>] <msg>`."""
    return f"[{msg_level}/{print_level}] {msg}"


def conditional_print(
    msg: str, msg_level: int, print_level: int, sink: Optional[Sink] = None
) -> None:
    """Writes `msg` to standard output if `msg_level <= print_level`.

    :param msg: Text of the message.
    :type msg: str
    :param msg_level: Importance of the message; lower means more important.
    :type msg_level: int
    :param print_level: Current verbosity threshold.
    :type print_level: int
    :param sink: Destination for the line; defaults to stdout.
    :type sink: Optional[Sink]
    """
    if msg_level <= print_level:
        if sink is None:
            sink = STDOUT
        sink.emit(format_conditional(msg, msg_level, print_level))


def conditional_error(
    msg: str, msg_level: int, print_level: int, sink: Optional[Sink] = None
) -> None:
    """Same gating and format as `conditional_print`, written to standard error."""
    if msg_level <= print_level:
        if sink is None:
            sink = STDERR
        sink.emit(format_conditional(msg, msg_level, print_level))
