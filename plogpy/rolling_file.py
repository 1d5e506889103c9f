"""An appender that writes to a file and rolls it over when it grows too large."""

from __future__ import annotations

import contextlib
import os
import threading
from typing import Any

from .appender import Appender
from .converters import NativeEOLConverter
from .formatters import TxtFormatter
from .record import Record
from .util import File, rename, split_file_name, unlink

__all__ = ["RollingFileAppender"]

_MIN_FILE_SIZE = 1000


class RollingFileAppender(Appender):
    """Appends records to a file, keeping up to ``max_files`` numbered old copies.

    The file is opened on the first write. A new, empty file starts with the
    converted formatter header. When ``max_files`` is positive and the file
    exceeds ``max_file_size`` bytes, ``name.ext`` becomes ``name.1.ext``,
    ``name.1.ext`` becomes ``name.2.ext`` and so on, and the oldest is deleted.
    """

    def __init__(
        self,
        file_name: str | os.PathLike[str],
        formatter: Any = TxtFormatter,
        converter: Any = NativeEOLConverter,
        max_file_size: int = 0,
        max_files: int = 0,
    ) -> None:
        self.formatter = formatter
        self.converter = converter
        self.max_files = max_files
        self._max_file_size = _MIN_FILE_SIZE
        self._lock = threading.RLock()
        self._file = File()
        self._file_size = 0
        self._first_write = True
        self._name_no_ext = ""
        self._ext = ""
        self.set_file_name(file_name)
        self.set_max_file_size(max_file_size)

    @property
    def max_file_size(self) -> int:
        return self._max_file_size

    def write(self, record: Record) -> None:
        with self._lock:
            if self._first_write:
                self._open_log_file()
                self._first_write = False
            elif self.max_files > 0 and self._file_size > self._max_file_size:
                self.roll_log_files()
            self._file_size += self._file.write(self.converter.convert(self.formatter.format(record)))

    def set_file_name(self, file_name: str | os.PathLike[str]) -> None:
        """Switch to another file; it is opened on the next write."""
        with self._lock:
            self._name_no_ext, self._ext = split_file_name(os.fspath(file_name))
            self._file.close()
            self._first_write = True

    def set_max_files(self, max_files: int) -> None:
        self.max_files = max_files

    def set_max_file_size(self, max_file_size: int) -> None:
        """Set the size limit; anything below 1000 bytes is raised to 1000."""
        self._max_file_size = max(max_file_size, _MIN_FILE_SIZE)

    def roll_log_files(self) -> None:
        """Shift the numbered copies up by one and start a fresh file."""
        with self._lock:
            self._file.close()
            with contextlib.suppress(OSError):
                unlink(self._build_file_name(self.max_files - 1))
            for number in range(self.max_files - 2, -1, -1):
                with contextlib.suppress(OSError):
                    rename(self._build_file_name(number), self._build_file_name(number + 1))
            self._open_log_file()
            self._first_write = False

    def _open_log_file(self) -> None:
        self._file_size = self._file.open(self._build_file_name())
        if self._file_size == 0:
            self._file_size += self._file.write(self.converter.header(self.formatter.header()))

    def _build_file_name(self, number: int = 0) -> str:
        name = self._name_no_ext
        if number > 0:
            name += f".{number}"
        if self._ext:
            name += f".{self._ext}"
        return name