"""Helpers that render binary data and named values inside log messages."""

from __future__ import annotations

from typing import Any

from .record import format_value

__all__ = ["HexDump", "hexdump", "AscDump", "ascdump", "print_var"]


def _as_bytes(data: Any) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return memoryview(data).tobytes()


class HexDump:
    """Two hex digits per byte, with a separator between digits and between groups.

    By default bytes are separated by a space and every 8 bytes by two spaces.
    """

    def __init__(self, data: Any) -> None:
        self._data = _as_bytes(data)
        self._group = 8
        self._digit_separator = " "
        self._group_separator = "  "

    def group(self, group: int) -> "HexDump":
        """Set the group size; 0 disables grouping."""
        self._group = group
        return self

    def separator(self, digit_separator: str, group_separator: str | None = None) -> "HexDump":
        """Set the separator between bytes and, if given, between groups."""
        self._digit_separator = digit_separator
        if group_separator is not None:
            self._group_separator = group_separator
        return self

    def __str__(self) -> str:
        parts = []
        for index, byte in enumerate(self._data):
            if index > 0:
                if self._group > 0 and index % self._group == 0:
                    parts.append(self._group_separator)
                else:
                    parts.append(self._digit_separator)
            parts.append(f"{byte:02x}")
        return "".join(parts)


def hexdump(data: Any) -> HexDump:
    """Wrap bytes-like data (or text, as UTF-8) for hex output."""
    return HexDump(data)


class AscDump:
    """Printable ASCII bytes as they are, every other byte as a dot."""

    def __init__(self, data: Any) -> None:
        self._data = _as_bytes(data)

    def __str__(self) -> str:
        return "".join(chr(byte) if 0x20 <= byte < 0x7F else "." for byte in self._data)


def ascdump(data: Any) -> AscDump:
    """Wrap bytes-like data (or text, as UTF-8) for ASCII output."""
    return AscDump(data)


def print_var(**kwargs: Any) -> str:
    """Render ``name: value`` pairs joined by ``", "``, in the order given."""
    if not kwargs:
        raise TypeError("print_var needs at least one variable")
    return ", ".join(f"{name}: {format_value(value)}" for name, value in kwargs.items())