"""Custom exceptions for emitkit."""

from __future__ import annotations

from typing import Any


class EmitkitError(Exception):
    """Base exception for all emitkit errors."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(EmitkitError):
    """Raised when there's a configuration problem."""

    pass


class UnhandledErrorEvent(EmitkitError):
    """Raised when ``"error"`` is emitted with no listener and a non-exception payload."""

    def __init__(self, *args_: Any, **kwargs_: Any) -> None:
        detail = args_[0] if args_ else None
        super().__init__(
            f"Unhandled 'error' event ({detail!r})",
            details={"args": args_, "kwargs": kwargs_},
        )
        self.args_ = args_
        self.kwargs_ = kwargs_
