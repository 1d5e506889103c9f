"""Formatters that turn a record into one line of log text."""

from __future__ import annotations

import time

from .record import Record
from .severity import severity_to_string
from .util import local_time, utc_time

__all__ = [
    "TxtFormatter",
    "TxtFormatterUtcTime",
    "CsvFormatter",
    "CsvFormatterUtcTime",
    "FuncMessageFormatter",
    "MessageOnlyFormatter",
]


class _TimedFormatter:
    use_utc_time = False

    @classmethod
    def _time(cls, record: Record) -> time.struct_time:
        return utc_time(record.time) if cls.use_utc_time else local_time(record.time)


class TxtFormatter(_TimedFormatter):
    """Plain text: ``date time severity [tid] [func@line] message``."""

    @classmethod
    def header(cls) -> str:
        return ""

    @classmethod
    def format(cls, record: Record) -> str:
        t = cls._time(record)
        return (
            f"{t.tm_year}-{t.tm_mon:02d}-{t.tm_mday:02d} "
            f"{t.tm_hour:02d}:{t.tm_min:02d}:{t.tm_sec:02d}.{record.time.millitm:03d} "
            f"{severity_to_string(record.severity):<5} "
            f"[{record.tid}] "
            f"[{record.func}@{record.line}] "
            f"{record.message}\n"
        )


class TxtFormatterUtcTime(TxtFormatter):
    """:class:`TxtFormatter` with times in UTC."""

    use_utc_time = True


def _object_text(obj: object) -> str:
    return "0" if obj is None else hex(id(obj))


class CsvFormatter(_TimedFormatter):
    """Semicolon-separated values with a quoted, size-limited message column."""

    max_message_size = 32000

    @classmethod
    def header(cls) -> str:
        return "Date;Time;Severity;TID;This;Function;Message\n"

    @classmethod
    def format(cls, record: Record) -> str:
        t = cls._time(record)
        message = record.message
        if len(message) > cls.max_message_size:
            message = message[: cls.max_message_size] + "..."
        quoted = '"' + message.replace('"', '""') + '"'
        return (
            f"{t.tm_year}/{t.tm_mon:02d}/{t.tm_mday:02d};"
            f"{t.tm_hour:02d}:{t.tm_min:02d}:{t.tm_sec:02d}.{record.time.millitm:03d};"
            f"{severity_to_string(record.severity)};"
            f"{record.tid};"
            f"{_object_text(record.obj)};"
            f"{record.func}@{record.line};"
            f"{quoted}\n"
        )


class CsvFormatterUtcTime(CsvFormatter):
    """:class:`CsvFormatter` with times in UTC."""

    use_utc_time = True


class FuncMessageFormatter:
    """``func@line: message``."""

    @classmethod
    def header(cls) -> str:
        return ""

    @classmethod
    def format(cls, record: Record) -> str:
        return f"{record.func}@{record.line}: {record.message}\n"


class MessageOnlyFormatter:
    """Just the message."""

    @classmethod
    def header(cls) -> str:
        return ""

    @classmethod
    def format(cls, record: Record) -> str:
        return f"{record.message}\n"