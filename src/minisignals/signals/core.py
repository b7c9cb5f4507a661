"""Core signal classes for synchronous event dispatch."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any
from weakref import WeakKeyDictionary

from minisignals.signals.binding import SignalBinding
from minisignals.signals.config import SignalConfig
from minisignals.signals.errors import (
    DisposedSignalError,
    InvalidListenerError,
    ListenerConflictError,
)


logger = logging.getLogger(__name__)

type Listener[*Ts] = Callable[[*Ts], Any]


class Signal[*Ts]:
    """Dispatcher holding an ordered list of listener bindings.

    Example:
        saved = Signal[str]()
        saved.add(lambda path: print(f"saved {path}"))
        saved.dispatch("/tmp/out.txt")
    """

    __slots__ = (
        "__weakref__",
        "_bindings",
        "_config",
        "_is_disposed",
        "_is_enabled",
        "_memorized",
        "_propagation",
    )

    def __init__(
        self,
        config: SignalConfig | None = None,
        *,
        name: str | None = None,
        memorize: bool | None = None,
    ) -> None:
        config = config or SignalConfig()
        overrides = {
            key: value
            for key, value in (("name", name), ("memorize", memorize))
            if value is not None
        }
        if overrides:
            config = config.model_copy(update=overrides)
        self._config = config
        self._bindings: list[SignalBinding[*Ts]] = []
        self._is_enabled = config.enabled
        self._is_disposed = False
        self._memorized: tuple[Any, ...] | None = None
        # one flag per dispatch in progress, innermost last
        self._propagation: list[bool] = []

    @property
    def name(self) -> str | None:
        return self._config.name

    @property
    def config(self) -> SignalConfig:
        return self._config

    @property
    def memorize(self) -> bool:
        """Whether the last dispatched arguments are replayed to new listeners."""
        return self._config.memorize

    @property
    def is_disposed(self) -> bool:
        return self._is_disposed

    def add(self, listener: Listener[*Ts], scope: Any = None) -> SignalBinding[*Ts]:
        """Add a listener.

        Adding a registered listener again returns its existing binding. On a
        memorizing signal the listener is executed right away with the last
        dispatched arguments, also when it was already registered.

        Args:
            listener: Callable invoked on every dispatch
            scope: Receiver passed as first argument to the listener

        Returns:
            The binding between this signal and the listener
        """
        return self._register_listener(listener, False, scope)

    def add_once(
        self, listener: Listener[*Ts], scope: Any = None
    ) -> SignalBinding[*Ts]:
        """Add a listener that is removed before its first execution.

        Args:
            listener: Callable invoked on the next dispatch only
            scope: Receiver passed as first argument to the listener

        Returns:
            The binding between this signal and the listener
        """
        return self._register_listener(listener, True, scope)

    def connect(self, listener: Listener[*Ts]) -> Listener[*Ts]:
        """Add listener and return it unchanged. Can be used as decorator."""
        self.add(listener)
        return listener

    def remove(self, listener: Listener[*Ts]) -> Listener[*Ts]:
        """Remove a listener.

        Removing a listener that is not registered is a no-op.

        Returns:
            The listener that was passed in
        """
        if not callable(listener):
            raise InvalidListenerError(listener, method="remove")
        index = self._index_of(listener)
        if index != -1:
            del self._bindings[index]
            logger.debug("Removed %r from %r", listener, self)
        return listener

    def remove_all(self) -> None:
        """Remove all listeners. The bindings themselves stay intact."""
        logger.debug("Removing %d listeners from %r", len(self._bindings), self)
        self._bindings.clear()

    def has(self, listener: Listener[*Ts]) -> bool:
        """Check whether the listener is registered."""
        return self._index_of(listener) != -1

    def __len__(self) -> int:
        return len(self._bindings)

    def halt(self) -> None:
        """Stop the dispatch in progress, remaining listeners are skipped.

        Only affects the innermost dispatch when dispatches are nested.
        Does nothing outside of a dispatch.
        """
        if self._propagation:
            self._propagation[-1] = False

    def dispatch(self, *args: *Ts) -> None:
        """Execute all listeners in the order they were added.

        Listeners added while dispatching are first called on the next
        dispatch. Listeners removed while dispatching are not called anymore.
        Exceptions raised by listeners propagate to the caller.
        """
        if self._is_disposed:
            raise DisposedSignalError("dispatch", self.name)
        if not self._is_enabled:
            return
        if self._config.memorize:
            self._memorized = args
        bindings = list(self._bindings)
        self._propagation.append(True)
        try:
            for binding in bindings:
                if not self._propagation[-1]:
                    logger.debug("Dispatch of %r halted", self)
                    break
                if binding not in self._bindings:
                    continue
                binding.execute(args)
        finally:
            self._propagation.pop()

    def forget(self) -> None:
        """Forget memorized arguments."""
        self._memorized = None

    def enable(self) -> None:
        """Resume dispatching."""
        self._is_enabled = True

    def disable(self) -> None:
        """Pause the signal, dispatch becomes a no-op until `enable()`."""
        self._is_enabled = False

    def is_enabled(self) -> bool:
        return self._is_enabled

    def dispose(self) -> None:
        """Dispose all bindings and make the signal unusable."""
        if self._is_disposed:
            raise DisposedSignalError("dispose", self.name)
        for binding in list(self._bindings):
            binding.dispose()
        self._memorized = None
        self._is_disposed = True
        logger.debug("Disposed %r", self)

    def _register_listener(
        self, listener: Listener[*Ts], is_once: bool, scope: Any
    ) -> SignalBinding[*Ts]:
        method = "add_once" if is_once else "add"
        if self._is_disposed:
            raise DisposedSignalError(method, self.name)
        if not callable(listener):
            raise InvalidListenerError(listener, method=method)

        index = self._index_of(listener)
        if index != -1:
            binding = self._bindings[index]
            if binding.is_once() != is_once:
                raise ListenerConflictError(listener, is_once=is_once)
        else:
            binding = SignalBinding(listener, is_once, scope, self)
            self._bindings.append(binding)
            logger.debug("Added %r to %r", binding, self)

        if self._memorized is not None:
            logger.debug("Replaying memorized arguments to %r", listener)
            binding.execute(self._memorized)
        return binding

    def _index_of(self, listener: Listener[*Ts]) -> int:
        for index, binding in enumerate(self._bindings):
            if binding.listener == listener:
                return index
        return -1

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, "
            f"is_enabled={self._is_enabled}, listeners={len(self._bindings)})"
        )


class ClassSignal[*Ts]:
    """Descriptor: define at class level, get a Signal per instance.

    The signal is stored in the instance `__dict__` under the attribute name.
    Instances without `__dict__` (e.g. `__slots__` classes) get theirs from a
    `WeakKeyDictionary` instead.

    Example:
        class Document:
            saved = ClassSignal[str]()

        doc = Document()
        doc.saved.add(print)
        doc.saved.dispatch("/tmp/doc.txt")
    """

    __slots__ = ("_config", "_name", "_signals")

    def __init__(self, config: SignalConfig | None = None) -> None:
        self._config = config or SignalConfig()
        self._name: str = ""
        self._signals: WeakKeyDictionary[object, Signal[*Ts]] = WeakKeyDictionary()

    def __set_name__(self, owner: type, name: str) -> None:
        self._name = name

    def __get__(self, obj: object | None, owner: type | None = None) -> Signal[*Ts]:
        if obj is None:
            # Class-level access - return a dummy for introspection
            return self._create_signal()
        # Stored on the instance, like functools.cached_property
        instance_dict = getattr(obj, "__dict__", None)
        if instance_dict is not None and self._name:
            if self._name not in instance_dict:
                instance_dict[self._name] = self._create_signal()
            return instance_dict[self._name]
        if obj not in self._signals:
            self._signals[obj] = self._create_signal()
        return self._signals[obj]

    def _create_signal(self) -> Signal[*Ts]:
        return Signal(self._config, name=self._config.name or self._name or None)
