"""Pure Python signal system: no Qt dependency.

Provides ``Signal`` for observer-pattern callbacks and ``ObservableProperty``
for field-level data binding in the picker view models.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Generic, TypeVar

_logger = logging.getLogger(__name__)

T = TypeVar("T")


class Signal:
    """Pure Python signal.

    The picker runs on a single cooperative event loop, so no locking is
    done. Handlers are snapshotted before emission; exceptions raised by
    individual handlers are caught and logged so that one failing handler
    does not prevent the rest from running.
    """

    def __init__(self) -> None:
        self._handlers: list[Callable] = []

    def connect(self, handler: Callable) -> Callable:
        if handler not in self._handlers:
            self._handlers.append(handler)
        return handler

    def disconnect(self, handler: Callable) -> None:
        self._handlers.remove(handler)

    def is_connected(self, handler: Callable) -> bool:
        return handler in self._handlers

    def disconnect_all(self) -> None:
        self._handlers.clear()

    def emit(self, *args: Any, **kwargs: Any) -> None:
        for handler in list(self._handlers):
            try:
                handler(*args, **kwargs)
            except Exception:
                _logger.exception("Signal handler %r failed", handler)

    @property
    def handler_count(self) -> int:
        return len(self._handlers)


class ObservableProperty(Generic[T]):
    """Observable value holder.

    Emits ``changed(new_value, old_value)`` whenever the value is set to
    something that compares unequal to the current one.
    """

    def __init__(self, initial_value: T = None) -> None:
        self._value = initial_value
        self.changed = Signal()

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, new_value: T) -> None:
        self.set(new_value)

    def set(self, new_value: T, *, force: bool = False) -> None:
        """Store *new_value*; with *force* it replaces an equal value and still emits."""
        if force or self._value != new_value:
            old_value = self._value
            self._value = new_value
            self.changed.emit(new_value, old_value)

    def __repr__(self) -> str:
        return f"ObservableProperty({self._value!r})"
