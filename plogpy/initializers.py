"""Shortcuts that set up a logger with a console or rolling-file appender."""

from __future__ import annotations

import os
from typing import Any

from .console import ColorConsoleAppender, OutputStream
from .formatters import CsvFormatter, TxtFormatter
from .logger import DEFAULT_INSTANCE_ID, Logger, init
from .rolling_file import RollingFileAppender
from .severity import Severity

__all__ = ["is_csv", "init_console", "init_file"]


def is_csv(file_name: str | os.PathLike[str]) -> bool:
    """Tell whether the text from the last dot of ``file_name`` is exactly ``.csv``."""
    name = os.fspath(file_name)
    dot = name.rfind(".")
    return dot >= 0 and name[dot:] == ".csv"


def init_console(
    max_severity: Severity | int,
    output_stream: OutputStream = OutputStream.STDOUT,
    formatter: Any = TxtFormatter,
    instance_id: int = DEFAULT_INSTANCE_ID,
) -> Logger:
    """Initialise a logger that writes to the console in colour."""
    appender = ColorConsoleAppender(formatter, output_stream)
    return init(max_severity, appender, instance_id)


def init_file(
    max_severity: Severity | int,
    file_name: str | os.PathLike[str],
    max_file_size: int = 0,
    max_files: int = 0,
    formatter: Any = None,
    instance_id: int = DEFAULT_INSTANCE_ID,
) -> Logger:
    """Initialise a logger that writes to a rolling file.

    Without a formatter, a ``.csv`` file gets CSV lines and any other file
    plain text.
    """
    if formatter is None:
        formatter = CsvFormatter if is_csv(file_name) else TxtFormatter
    appender = RollingFileAppender(
        file_name, formatter, max_file_size=max_file_size, max_files=max_files
    )
    return init(max_severity, appender, instance_id)