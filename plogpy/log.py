"""Logging entry points that build a record and pass it to a logger instance."""

from __future__ import annotations

import inspect
from types import FrameType
from typing import Any

from .logger import DEFAULT_INSTANCE_ID, get
from .record import Record
from .severity import Severity

__all__ = [
    "is_enabled",
    "log",
    "log_if",
    "verbose",
    "debug",
    "info",
    "warning",
    "error",
    "fatal",
    "none",
]


def is_enabled(severity: Severity | int, instance_id: int = DEFAULT_INSTANCE_ID) -> bool:
    """Tell whether a record of ``severity`` would reach the logger ``instance_id``."""
    logger = get(instance_id)
    return logger is not None and logger.check_severity(severity)


def _emit(
    severity: Severity | int,
    args: tuple[Any, ...],
    instance_id: int,
    frame: FrameType | None,
) -> Record | None:
    logger = get(instance_id)
    if logger is None or not logger.check_severity(severity):
        return None
    if frame is not None:
        code = frame.f_code
        func = getattr(code, "co_qualname", code.co_name)
        line = frame.f_lineno
        file = code.co_filename
    else:
        func, line, file = "", 0, ""
    record = Record(severity, func, line, file, None, instance_id)
    for data in args:
        record << data
    logger.dispatch(record)
    return record


def _caller() -> FrameType | None:
    frame = inspect.currentframe()
    if frame is None or frame.f_back is None:
        return None
    return frame.f_back.f_back


def log(severity: Severity | int, *args: Any, instance_id: int = DEFAULT_INSTANCE_ID) -> Record | None:
    """Log ``args`` concatenated as one message; return the record, or None if filtered out."""
    return _emit(severity, args, instance_id, _caller())


def log_if(
    severity: Severity | int,
    condition: object,
    *args: Any,
    instance_id: int = DEFAULT_INSTANCE_ID,
) -> Record | None:
    """Log like :func:`log`, but only when ``condition`` is true."""
    if not condition:
        return None
    return _emit(severity, args, instance_id, _caller())


def verbose(*args: Any, instance_id: int = DEFAULT_INSTANCE_ID) -> Record | None:
    """Log at verbose severity."""
    return _emit(Severity.VERBOSE, args, instance_id, _caller())


def debug(*args: Any, instance_id: int = DEFAULT_INSTANCE_ID) -> Record | None:
    """Log at debug severity."""
    return _emit(Severity.DEBUG, args, instance_id, _caller())


def info(*args: Any, instance_id: int = DEFAULT_INSTANCE_ID) -> Record | None:
    """Log at info severity."""
    return _emit(Severity.INFO, args, instance_id, _caller())


def warning(*args: Any, instance_id: int = DEFAULT_INSTANCE_ID) -> Record | None:
    """Log at warning severity."""
    return _emit(Severity.WARNING, args, instance_id, _caller())


def error(*args: Any, instance_id: int = DEFAULT_INSTANCE_ID) -> Record | None:
    """Log at error severity."""
    return _emit(Severity.ERROR, args, instance_id, _caller())


def fatal(*args: Any, instance_id: int = DEFAULT_INSTANCE_ID) -> Record | None:
    """Log at fatal severity."""
    return _emit(Severity.FATAL, args, instance_id, _caller())


def none(*args: Any, instance_id: int = DEFAULT_INSTANCE_ID) -> Record | None:
    """Log at the "none" severity, which passes any initialised logger."""
    return _emit(Severity.NONE, args, instance_id, _caller())