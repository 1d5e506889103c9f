"""Time stamps, thread ids, name helpers and an append-only log file."""

from __future__ import annotations

import os
import threading
import time
from dataclasses import dataclass

__all__ = [
    "Timestamp",
    "local_time",
    "utc_time",
    "gettid",
    "process_func_name",
    "split_file_name",
    "File",
    "unlink",
    "rename",
]


@dataclass(frozen=True)
class Timestamp:
    """Wall-clock time as whole seconds since the epoch plus milliseconds."""

    time: int
    millitm: int = 0

    @classmethod
    def now(cls) -> "Timestamp":
        """Return the current time."""
        ns = time.time_ns()
        seconds, rest = divmod(ns, 1_000_000_000)
        return cls(seconds, rest // 1_000_000)


def local_time(timestamp: Timestamp) -> time.struct_time:
    """Break a timestamp down in the local time zone."""
    return time.localtime(timestamp.time)


def utc_time(timestamp: Timestamp) -> time.struct_time:
    """Break a timestamp down in UTC."""
    return time.gmtime(timestamp.time)


def gettid() -> int:
    """Return the operating-system id of the calling thread."""
    return threading.get_native_id()


def process_func_name(func: str) -> str:
    """Reduce a full function signature to its qualified name.

    The text before the first ``(`` is kept, starting after the last space
    that precedes it. Names without ``(`` are returned unchanged.
    """
    end = func.find("(")
    if end < 0:
        return func
    begin = func.rfind(" ", 0, end) + 1
    return func[begin:end]


def split_file_name(file_name: str) -> tuple[str, str]:
    """Split a file name at its last dot into (name without extension, extension)."""
    dot = file_name.rfind(".")
    if dot < 0:
        return file_name, ""
    return file_name[:dot], file_name[dot + 1 :]


_OPEN_FLAGS = os.O_CREAT | os.O_APPEND | os.O_WRONLY | getattr(os, "O_CLOEXEC", 0) | getattr(os, "O_BINARY", 0)
_OPEN_MODE = 0o644


class File:
    """A file opened for appending, written through its raw descriptor."""

    def __init__(self, file_name: str | os.PathLike[str] | None = None) -> None:
        self._fd: int | None = None
        if file_name is not None:
            self.open(file_name)

    @property
    def is_open(self) -> bool:
        return self._fd is not None

    def open(self, file_name: str | os.PathLike[str]) -> int:
        """Open (creating if needed) ``file_name`` for appending; return its size.

        Raises OSError if the file cannot be opened.
        """
        self.close()
        self._fd = os.open(file_name, _OPEN_FLAGS, _OPEN_MODE)
        return os.lseek(self._fd, 0, os.SEEK_END)

    def write(self, data: bytes | str) -> int:
        """Append ``data`` and return the number of bytes written.

        Text is written as UTF-8. Raises OSError if the file is not open.
        """
        if self._fd is None:
            raise OSError("file is not open")
        if isinstance(data, str):
            data = data.encode("utf-8")
        return os.write(self._fd, data)

    def close(self) -> None:
        """Close the file if it is open."""
        if self._fd is not None:
            fd, self._fd = self._fd, None
            os.close(fd)

    def __enter__(self) -> "File":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def __del__(self) -> None:
        try:
            self.close()
        except OSError:
            pass


def unlink(file_name: str | os.PathLike[str]) -> None:
    """Delete a file. Raises OSError on failure."""
    os.unlink(file_name)


def rename(old_file_name: str | os.PathLike[str], new_file_name: str | os.PathLike[str]) -> None:
    """Rename a file. Raises OSError on failure."""
    os.rename(old_file_name, new_file_name)