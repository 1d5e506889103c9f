"""The interface every log destination implements."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .record import Record

__all__ = ["Appender"]


class Appender(ABC):
    """A destination that log records are written to."""

    @abstractmethod
    def write(self, record: Record) -> None:
        """Deliver one record."""