"""Loggers, one per instance id, that filter records and pass them to appenders."""

from __future__ import annotations

import threading

from .appender import Appender
from .record import Record
from .severity import Severity

__all__ = ["Logger", "init", "get", "reset", "DEFAULT_INSTANCE_ID"]

DEFAULT_INSTANCE_ID = 0


class Logger(Appender):
    """Filters records by severity and forwards them to its appenders.

    A logger is itself an appender, so one logger can feed another.
    """

    def __init__(self, max_severity: Severity | int = Severity.NONE) -> None:
        self.max_severity = Severity(max_severity)
        self._appenders: list[Appender] = []

    def add_appender(self, appender: Appender) -> "Logger":
        """Add a destination; returns the logger so calls can be chained."""
        if appender is self:
            raise ValueError("a logger cannot be its own appender")
        self._appenders.append(appender)
        return self

    def check_severity(self, severity: Severity | int) -> bool:
        """Tell whether a record of ``severity`` passes this logger."""
        return severity <= self.max_severity

    def write(self, record: Record) -> None:
        """Forward ``record`` if its severity passes the filter."""
        if self.check_severity(record.severity):
            self.dispatch(record)

    def dispatch(self, record: Record) -> None:
        """Forward ``record`` to every appender without filtering."""
        for appender in self._appenders:
            appender.write(record)


_loggers: dict[int, Logger] = {}
_lock = threading.Lock()


def init(
    max_severity: Severity | int = Severity.NONE,
    appender: Appender | None = None,
    instance_id: int = DEFAULT_INSTANCE_ID,
) -> Logger:
    """Return the logger for ``instance_id``, creating it on first use.

    The severity only takes effect when the logger is created; ``appender``,
    if given, is added to the logger on every call.
    """
    with _lock:
        logger = _loggers.get(instance_id)
        if logger is None:
            logger = _loggers[instance_id] = Logger(max_severity)
    if appender is not None:
        logger.add_appender(appender)
    return logger


def get(instance_id: int = DEFAULT_INSTANCE_ID) -> Logger | None:
    """Return the logger for ``instance_id``, or None if it was never initialised."""
    with _lock:
        return _loggers.get(instance_id)


def reset() -> None:
    """Forget every initialised logger."""
    with _lock:
        _loggers.clear()