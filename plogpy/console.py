"""Appenders that write formatted records to standard output or standard error."""

from __future__ import annotations

import sys
import threading
from enum import Enum
from typing import Any, TextIO

from .appender import Appender
from .formatters import TxtFormatter
from .record import Record
from .severity import Severity

__all__ = ["OutputStream", "ConsoleAppender", "ColorConsoleAppender"]


class OutputStream(Enum):
    """Which standard stream a console appender writes to."""

    STDOUT = "stdout"
    STDERR = "stderr"


def _isatty(stream: Any) -> bool:
    try:
        return bool(stream.isatty())
    except (AttributeError, ValueError, OSError):
        return False


class ConsoleAppender(Appender):
    """Writes each formatted record to a text stream and flushes it.

    ``stream`` overrides the standard stream chosen by ``output_stream``.
    """

    def __init__(
        self,
        formatter: Any = TxtFormatter,
        output_stream: OutputStream = OutputStream.STDOUT,
        stream: TextIO | None = None,
    ) -> None:
        self.formatter = formatter
        if stream is None:
            if OutputStream(output_stream) is OutputStream.STDOUT:
                stream = sys.stdout
            else:
                stream = sys.stderr
        self.stream = stream
        self.isatty = _isatty(stream)
        self._lock = threading.Lock()

    def write(self, record: Record) -> None:
        text = self.formatter.format(record)
        with self._lock:
            self._write_text(text)

    def _write_text(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()


_COLORS = {
    Severity.FATAL: "\x1b[97m\x1b[41m",
    Severity.ERROR: "\x1b[91m",
    Severity.WARNING: "\x1b[93m",
    Severity.DEBUG: "\x1b[96m",
    Severity.VERBOSE: "\x1b[96m",
}
_RESET = "\x1b[0m\x1b[0K"


class ColorConsoleAppender(ConsoleAppender):
    """A console appender that colours records by severity on a terminal."""

    def write(self, record: Record) -> None:
        text = self.formatter.format(record)
        with self._lock:
            if self.isatty:
                text = _COLORS.get(record.severity, "") + text + _RESET
            self._write_text(text)