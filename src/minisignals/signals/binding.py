"""Binding between a signal and a single listener."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from weakref import ref

from minisignals.signals.errors import DisposedBindingError, InvalidListenerError


if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from minisignals.signals.core import Signal


logger = logging.getLogger(__name__)


class SignalBinding[*Ts]:
    """One listener attached to one signal.

    Bindings are created by `Signal.add()` / `Signal.add_once()` and are not
    meant to be constructed directly.

    The binding only holds a weak reference to its signal, so keeping a
    binding around never keeps the signal alive. `dispose()` detaches the
    binding and drops every reference it holds; the binding is unusable
    afterwards.

    Example:
        binding = signal.add(on_change)
        binding.disable()   # paused, dispatch skips it
        binding.enable()
        binding.dispose()   # detached and released
    """

    __slots__ = ("_is_enabled", "_is_once", "_listener", "_scope", "_signal")

    def __init__(
        self,
        listener: Callable[..., Any],
        is_once: bool,
        scope: Any,
        signal: Signal[*Ts],
    ) -> None:
        """Create a binding.

        Args:
            listener: Handler called on execution
            is_once: Whether the binding detaches itself before its first execution
            scope: Receiver passed as first argument to the listener (None = no receiver)
            signal: Signal the listener is being attached to
        """
        if not callable(listener):
            raise InvalidListenerError(listener, method="SignalBinding")
        self._listener: Callable[..., Any] | None = listener
        self._is_once = is_once
        self._scope: Any = scope
        self._signal: ref[Signal[*Ts]] | None = ref(signal)
        self._is_enabled = True

    def execute(self, args: Sequence[Any] = ()) -> Any:
        """Call the listener with the given positional arguments.

        Once-only bindings are detached before the listener runs, so they can
        never be invoked twice, not even by a nested dispatch of the same
        signal or when the listener raises.

        Args:
            args: Positional arguments passed to the listener

        Returns:
            Whatever the listener returns, None if the binding is disabled
        """
        if self._listener is None:
            raise DisposedBindingError("execute")
        if not self._is_enabled:
            return None
        listener = self._listener
        scope = self._scope
        if self._is_once:
            self.detach()
        if scope is None:
            return listener(*args)
        return listener(scope, *args)

    def detach(self) -> Callable[..., Any]:
        """Remove the binding from its signal.

        Alias of `signal.remove(binding.listener)`.

        Returns:
            The listener, e.g. to register it again elsewhere
        """
        if self._signal is None or self._listener is None:
            raise DisposedBindingError("detach")
        signal = self._signal()
        if signal is None:
            msg = "the signal this binding was attached to no longer exists"
            raise ReferenceError(msg)
        return signal.remove(self._listener)

    def dispose(self) -> None:
        """Detach the binding and release listener, scope and signal.

        A binding whose signal was garbage collected has nothing to detach
        from and is only released.
        """
        if self._signal is None:
            raise DisposedBindingError("dispose")
        if self._signal() is not None:
            self.detach()
        logger.debug("Disposing binding for %r", self._listener)
        self._signal = None
        self._listener = None
        self._scope = None

    def enable(self) -> None:
        """Resume execution of the listener."""
        self._is_enabled = True

    def disable(self) -> None:
        """Pause the binding, execution becomes a no-op until `enable()`."""
        self._is_enabled = False

    def is_enabled(self) -> bool:
        return self._is_enabled

    def is_once(self) -> bool:
        return self._is_once

    @property
    def is_disposed(self) -> bool:
        return self._signal is None

    @property
    def listener(self) -> Callable[..., Any] | None:
        """The bound listener, None once disposed."""
        return self._listener

    @property
    def scope(self) -> Any:
        """Receiver the listener is invoked with, None if unbound or disposed."""
        return self._scope

    @property
    def signal(self) -> Signal[*Ts] | None:
        """Owning signal, None once disposed or garbage collected."""
        return self._signal() if self._signal is not None else None

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(listener={self._listener!r}, "
            f"is_once={self._is_once}, is_enabled={self._is_enabled}, "
            f"scope={self._scope!r})"
        )
