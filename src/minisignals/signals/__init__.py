"""Synchronous signals package.

A small observer-pattern primitive: a `Signal` keeps an ordered list of
`SignalBinding` objects, one per listener, and calls them on dispatch.

Example:
    # Standalone signal
    started = Signal[str]()
    binding = started.add_once(lambda name: print(f"{name} started"))
    started.dispatch("worker")

    # Per-instance signals
    class Counter:
        incremented = ClassSignal[int]()
"""

from __future__ import annotations

from .binding import SignalBinding
from .config import SignalConfig
from .core import ClassSignal, Signal
from .errors import (
    DisposedBindingError,
    DisposedSignalError,
    InvalidListenerError,
    ListenerConflictError,
    SignalError,
)

__all__ = [
    "ClassSignal",
    "DisposedBindingError",
    "DisposedSignalError",
    "InvalidListenerError",
    "ListenerConflictError",
    "Signal",
    "SignalBinding",
    "SignalConfig",
    "SignalError",
]
