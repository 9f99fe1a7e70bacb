"""Minimal logging interface shared between the UI and lower layers."""

from __future__ import annotations

from typing import Any, Callable, Protocol


class Logger(Protocol):
    """Levelled logging calls that lower layers can rely on."""

    def debug(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def error_with_context(self, err: Any, sub: str, *context: str) -> None: ...

    def info(self, message: str) -> None: ...

    def trace(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...


class FmtLogger:
    """Logger that prints every message to standard output."""

    def debug(self, message: str) -> None:
        print(message)

    def error(self, message: str) -> None:
        print(message)

    def error_with_context(self, err: Any, sub: str, *context: str) -> None:
        print(f"err: {err}")
        print(sub)
        for entry in context:
            print(entry)

    def info(self, message: str) -> None:
        print(message)

    def trace(self, message: str) -> None:
        print(message)

    def warning(self, message: str) -> None:
        print(message)


class TestLogger:
    """Logger that hands every message to a callable, such as a test's log function."""

    __test__ = False

    def __init__(self, log: Callable[..., Any]) -> None:
        self._log = log

    def debug(self, message: str) -> None:
        self._log(message)

    def error(self, message: str) -> None:
        self._log(message)

    def error_with_context(self, err: Any, sub: str, *context: str) -> None:
        self._log(f"err: {err}")
        self._log(sub)
        for entry in context:
            self._log(entry)

    def info(self, message: str) -> None:
        self._log(message)

    def trace(self, message: str) -> None:
        self._log(message)

    def warning(self, message: str) -> None:
        self._log(message)


def default() -> FmtLogger:
    """Return a logger that prints to standard output."""
    return FmtLogger()