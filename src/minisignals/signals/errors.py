"""Exceptions raised by signals and their bindings."""

from __future__ import annotations

from typing import Any


class SignalError(Exception):
    """Base class for all signal errors."""


class InvalidListenerError(SignalError, TypeError):
    """A listener that is not callable was passed to a signal or binding."""

    def __init__(self, listener: Any, *, method: str = "add"):
        super().__init__(
            f"listener is a required param of {method}() and should be callable, "
            f"got {type(listener).__name__}"
        )
        self.listener = listener


class ListenerConflictError(SignalError, ValueError):
    """A listener was registered with both add() and add_once()."""

    def __init__(self, listener: Any, *, is_once: bool):
        first, second = ("add", "add_once") if is_once else ("add_once", "add")
        super().__init__(
            f"You cannot {first}() then {second}() the same listener "
            f"without removing the relationship first: {listener!r}"
        )
        self.listener = listener


class DisposedBindingError(SignalError):
    """A binding was used after dispose() released its references."""

    def __init__(self, operation: str):
        super().__init__(f"cannot {operation}() a binding that has been disposed")
        self.operation = operation


class DisposedSignalError(SignalError):
    """A signal was used after dispose()."""

    def __init__(self, operation: str, name: str | None = None):
        label = f"signal {name!r}" if name else "signal"
        super().__init__(f"cannot {operation}() on a disposed {label}")
        self.operation = operation
