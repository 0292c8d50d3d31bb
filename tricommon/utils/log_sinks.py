# tricommon/utils/log_sinks.py
"""
Output sinks for the toolkit's console-facing operations.

Every operation that prints (conditional print/error, clamp warnings, verbose
alignment checks) writes through a `Sink` instead of touching `sys.stdout` or
`sys.stderr` directly. Host code can pass its own sink to capture lines or to
route them into its logging pipeline; the defaults reproduce plain console
output.
"""
import logging
import sys
from typing import List, Protocol, TextIO, Union, runtime_checkable


@runtime_checkable
class Sink(Protocol):
    """Anything that accepts one complete output line at a time."""

    def emit(self, line: str) -> None:
        ...


class StreamSink:
    """
    Writes each line to a text stream followed by a newline, as a single
    `write` call plus a flush.

    Passing a stream name ("stdout" / "stderr") defers the lookup on `sys`
    to emit time, so redirected or captured streams are honoured.
    """

    def __init__(self, stream: Union[str, TextIO]):
        """Initializes the sink.

        :param stream: A stream object, or the name of a `sys` stream attribute.
        :type stream: Union[str, TextIO]
        """
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        if isinstance(self._stream, str):
            return getattr(sys, self._stream)
        return self._stream

    def emit(self, line: str) -> None:
        stream = self.stream
        stream.write(line + "\n")
        stream.flush()

    def __repr__(self) -> str:
        return f"StreamSink({self._stream!r})"


class LoggerSink:
    """
    Forwards each line to a `logging` logger at a fixed level.

    Useful when the host application wants toolkit output to travel through
    its own handlers and formatters instead of the raw console.
    """

    def __init__(
        self,
        logger: Union[logging.Logger, logging.LoggerAdapter],
        level: int = logging.INFO,
    ):
        self.logger = logger
        self.level = level

    def emit(self, line: str) -> None:
        self.logger.log(self.level, line)


class ListSink:
    """Collects emitted lines in memory."""

    def __init__(self):
        self.lines: List[str] = []

    def emit(self, line: str) -> None:
        self.lines.append(line)

    def clear(self) -> None:
        self.lines.clear()


STDOUT = StreamSink("stdout")
STDERR = StreamSink("stderr")
