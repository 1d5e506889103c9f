"""Logging with severities, per-instance loggers, console and rolling-file appenders, formatters and dump helpers."""

__version__ = "1.0.0"