"""Structured, level-filtered logging of errors to a text stream."""

from __future__ import annotations

import sys
from datetime import datetime
from enum import IntEnum
from typing import Any, Mapping, TextIO

from .errors import ErrorCode, GopherError


class LogLevel(IntEnum):
    """Severity of a log message, in increasing order."""

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    FATAL = 4

    def __str__(self) -> str:
        return self.name


_WARN_CODES = frozenset(
    {
        ErrorCode.INVALID_VERSION,
        ErrorCode.INVALID_ARGUMENT,
        ErrorCode.INVALID_FORMAT,
        ErrorCode.MISSING_ARGUMENT,
        ErrorCode.INVALID_ALIAS_NAME,
        ErrorCode.RESERVED_NAME,
        ErrorCode.UNKNOWN_CONFIG_OPTION,
        ErrorCode.INVALID_CONFIG_VALUE,
        ErrorCode.NOT_IMPLEMENTED,
    }
)

_INFO_CODES = frozenset(
    {
        ErrorCode.VERSION_NOT_INSTALLED,
        ErrorCode.VERSION_ALREADY_INSTALLED,
        ErrorCode.OPERATION_CANCELLED,
    }
)


def _level_for(err: BaseException) -> LogLevel:
    if isinstance(err, GopherError):
        if err.code in _WARN_CODES:
            return LogLevel.WARN
        if err.code in _INFO_CODES:
            return LogLevel.INFO
    return LogLevel.ERROR


def _timestamp() -> str:
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S")


def _format_context(context: Mapping[str, Any]) -> str:
    if not context:
        return ""
    parts = " ".join(f"{key}={value}" for key, value in context.items())
    return f"{{[{parts}]}}"


class ErrorLogger:
    """Writes error lines at or above ``level`` to ``stream`` (stderr by default)."""

    def __init__(self, level: LogLevel = LogLevel.INFO, stream: TextIO | None = None) -> None:
        self.level = LogLevel(level)
        self._stream = stream

    def _write(self, line: str) -> None:
        stream = self._stream if self._stream is not None else sys.stderr
        stream.write(line + "\n")
        stream.flush()

    def log_error(
        self, err: BaseException | None, context: Mapping[str, Any] | None = None
    ) -> None:
        """Log ``err`` with optional context, if its level is high enough."""
        if err is None:
            return
        level = _level_for(err)
        if level < self.level:
            return
        message = f"[{_timestamp()}] [{level}] {err}"
        if context:
            message += f" | Context: {_format_context(context)}"
        self._write(message)

    def log_message(self, level: LogLevel, message: str, *args: Any) -> None:
        """Log ``message % args`` at ``level``, if that level is enabled."""
        level = LogLevel(level)
        if level < self.level:
            return
        text = message % args if args else message
        self._write(f"[{level}] {text}")

    def log_gopher_error(
        self, err: GopherError | None, context: Mapping[str, Any] | None = None
    ) -> None:
        """Log ``err`` with its code, details, merged context and location."""
        if err is None:
            return
        level = _level_for(err)
        if level < self.level:
            return
        merged = {**err.context, **(context or {})}
        message = f"[{_timestamp()}] [{level}] [{err.code}] {err.message}"
        if err.details:
            message += f" | Details: {err.details}"
        if merged:
            message += f" | Context: {_format_context(merged)}"
        if err.file:
            message += f" | Location: {err.file}:{err.line}"
        if err.wrapped is not None:
            message += f" | Wrapped: {err.wrapped}"
        self._write(message)


default_logger = ErrorLogger(LogLevel.INFO)


def log_error(err: BaseException | None, context: Mapping[str, Any] | None = None) -> None:
    """Log ``err`` through the default logger."""
    default_logger.log_error(err, context)


def log_message(level: LogLevel, message: str, *args: Any) -> None:
    """Log a formatted message through the default logger."""
    default_logger.log_message(level, message, *args)


def log_gopher_error(
    err: GopherError | None, context: Mapping[str, Any] | None = None
) -> None:
    """Log a ``GopherError`` through the default logger."""
    default_logger.log_gopher_error(err, context)