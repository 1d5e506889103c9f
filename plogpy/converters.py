"""Converters that turn formatted log text into the bytes written to a file."""

from __future__ import annotations

import os

__all__ = ["UTF8Converter", "NativeEOLConverter"]

_BOM = b"\xef\xbb\xbf"


class UTF8Converter:
    """Encodes text as UTF-8; a file header is preceded by a byte-order mark."""

    @classmethod
    def header(cls, text: str) -> bytes:
        return _BOM + UTF8Converter.convert(text)

    @classmethod
    def convert(cls, text: str) -> bytes:
        return text.encode("utf-8")


class NativeEOLConverter(UTF8Converter):
    """Uses the platform's line ending before encoding as UTF-8."""

    eol = "\r\n" if os.name == "nt" else "\n"

    @classmethod
    def _fix_line_endings(cls, text: str) -> str:
        return text if cls.eol == "\n" else text.replace("\n", cls.eol)

    @classmethod
    def header(cls, text: str) -> bytes:
        return super().header(cls._fix_line_endings(text))

    @classmethod
    def convert(cls, text: str) -> bytes:
        return super().convert(cls._fix_line_endings(text))