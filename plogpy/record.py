"""A single log record and the rules for turning values into message text."""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence, Set
from typing import Any

from .severity import Severity
from .util import Timestamp, gettid, process_func_name

__all__ = ["format_value", "Record"]

_NULL = "(null)"


def format_value(data: Any) -> str:
    """Render ``data`` as it appears in a log message.

    ``None`` becomes ``(null)``; strings and paths are written as they are;
    mappings and other collections are written as ``[a, b, c]``, mapping
    entries as ``key:value``; anything else goes through ``str``.
    """
    if data is None:
        return _NULL
    if isinstance(data, str):
        return data
    if isinstance(data, (bytes, bytearray)):
        return bytes(data).decode("utf-8", "replace")
    if isinstance(data, os.PathLike):
        return str(data)
    if isinstance(data, Mapping):
        items = (f"{format_value(key)}:{format_value(value)}" for key, value in data.items())
        return "[" + ", ".join(items) + "]"
    if isinstance(data, (Sequence, Set)):
        return "[" + ", ".join(format_value(item) for item in data) + "]"
    return str(data)


class Record:
    """One log event: its severity, origin, time, thread and message text.

    Message text is built up with ``<<`` (chainable) or :meth:`printf`.
    """

    def __init__(
        self,
        severity: Severity | int,
        func: str = "",
        line: int = 0,
        file: str = "",
        obj: object = None,
        instance_id: int = 0,
    ) -> None:
        self.time = Timestamp.now()
        self.severity = Severity(severity)
        self.tid = gettid()
        self.obj = obj
        self.line = line
        self.file = file
        self.instance_id = instance_id
        self._func = func
        self._parts: list[str] = []

    def __lshift__(self, data: Any) -> "Record":
        self._parts.append(format_value(data))
        return self

    def printf(self, fmt: str, *args: Any) -> "Record":
        """Append ``fmt`` formatted with printf-style ``%`` conversions."""
        self._parts.append(fmt % args if args else fmt)
        return self

    @property
    def message(self) -> str:
        """The message text collected so far."""
        return "".join(self._parts)

    @property
    def func(self) -> str:
        """The function name, reduced from a full signature where one was given."""
        return process_func_name(self._func)

    def __repr__(self) -> str:
        return (
            f"Record(severity={self.severity.name}, func={self.func!r}, "
            f"line={self.line}, message={self.message!r})"
        )