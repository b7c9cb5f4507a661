"""minisignals: synchronous signal/slot dispatch for Python."""

__version__ = "0.1.0"

from minisignals.signals import (
    ClassSignal,
    DisposedBindingError,
    DisposedSignalError,
    InvalidListenerError,
    ListenerConflictError,
    Signal,
    SignalBinding,
    SignalConfig,
    SignalError,
)

__all__ = [
    # Errors
    "DisposedBindingError",
    "DisposedSignalError",
    "InvalidListenerError",
    "ListenerConflictError",
    "SignalError",
    # Signals
    "ClassSignal",
    "Signal",
    "SignalBinding",
    "SignalConfig",
]
