"""Turn unexpected exceptions into ``GopherError`` values and log them."""

from __future__ import annotations

import threading
import traceback
from types import TracebackType
from typing import Callable, TypeVar

from .errlog import ErrorLogger
from .errors import ErrorCode, GopherError

T = TypeVar("T")


class _RecoveryScope:
    """Context manager that catches exceptions and converts them.

    After the block, ``error`` holds the recovered ``GopherError`` or None.
    Exceptions that are not ``Exception`` subclasses (such as
    ``KeyboardInterrupt``) are never swallowed.
    """

    def __init__(
        self,
        recoverer: Recoverer,
        handler: Callable[[GopherError], object] | None = None,
    ) -> None:
        self._recoverer = recoverer
        self._handler = handler
        self.error: GopherError | None = None

    def __enter__(self) -> _RecoveryScope:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        if exc is None or not isinstance(exc, Exception):
            return False
        self.error = self._recoverer.recover(exc)
        if self._handler is not None and self.error is not None:
            self._handler(self.error)
        return True


class Recoverer:
    """Converts unexpected exceptions into ``GopherError`` and logs them."""

    def __init__(self, logger: ErrorLogger | None = None) -> None:
        self.logger = logger

    def recover(self, exc: BaseException | None) -> GopherError | None:
        """Return a ``GopherError`` describing ``exc``, or None when there is none."""
        if exc is None:
            return None
        stack = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        err = GopherError(ErrorCode.UNKNOWN, f"panic occurred: {exc}")
        err.with_details(f"Stack trace:\n{stack}")
        err.__cause__ = exc
        if self.logger is not None:
            self.logger.log_gopher_error(
                err,
                {"panic_value": exc, "threads": threading.active_count()},
            )
        return err

    def recover_with_handler(
        self, handler: Callable[[GopherError], object]
    ) -> _RecoveryScope:
        """Return a context manager that passes any recovered error to ``handler``."""
        return _RecoveryScope(self, handler)

    def safe_execute(self, fn: Callable[[], T]) -> T:
        """Call ``fn`` and return its result.

        A ``GopherError`` raised by ``fn`` propagates unchanged; any other
        exception is converted and raised as a ``GopherError``.
        """
        try:
            return fn()
        except GopherError:
            raise
        except Exception as exc:
            recovered = self.recover(exc)
            assert recovered is not None
            raise recovered from exc


def safe_execute_with_result(fn: Callable[[], T]) -> T:
    """Like ``Recoverer.safe_execute`` with no logger."""
    return Recoverer(None).safe_execute(fn)


def recover(logger: ErrorLogger | None = None) -> _RecoveryScope:
    """Return a context manager that swallows and records exceptions."""
    return _RecoveryScope(Recoverer(logger))


def recover_with_handler(
    logger: ErrorLogger | None, handler: Callable[[GopherError], object]
) -> _RecoveryScope:
    """Return a context manager that passes recovered errors to ``handler``."""
    return Recoverer(logger).recover_with_handler(handler)


def must(err: BaseException | None) -> None:
    """Raise ``err`` if it is not None."""
    if err is not None:
        raise err


def must_value(value: T, err: BaseException | None) -> T:
    """Raise ``err`` if it is not None, otherwise return ``value``."""
    if err is not None:
        raise err
    return value