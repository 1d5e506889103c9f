"""An appender whose set of destinations can change while logging."""

from __future__ import annotations

import threading

from .appender import Appender
from .record import Record

__all__ = ["DynamicAppender"]


class DynamicAppender(Appender):
    """Forwards records to a set of appenders that may be added and removed at any time."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._appenders: dict[int, Appender] = {}

    def add_appender(self, appender: Appender) -> "DynamicAppender":
        """Add a destination (once); returns self for chaining."""
        if appender is self:
            raise ValueError("a dynamic appender cannot contain itself")
        with self._lock:
            self._appenders.setdefault(id(appender), appender)
        return self

    def remove_appender(self, appender: Appender) -> "DynamicAppender":
        """Remove a destination if present; returns self for chaining."""
        with self._lock:
            self._appenders.pop(id(appender), None)
        return self

    def write(self, record: Record) -> None:
        with self._lock:
            for appender in self._appenders.values():
                appender.write(record)