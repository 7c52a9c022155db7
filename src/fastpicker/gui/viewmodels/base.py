"""BaseViewModel: pure Python, no Qt dependency.

Provides subscription lifecycle management so that concrete view models can
subscribe to ``EventBus`` events, signals and external listeners and have
them released automatically via ``dispose()``.
"""

from __future__ import annotations

from typing import Callable, Type

from fastpicker.events.bus import EventBus, Subscription
from fastpicker.gui.viewmodels.signal import Signal


class BaseViewModel:
    """View model base class: pure Python, no Qt dependency."""

    def __init__(self) -> None:
        self._subscriptions: list[Subscription] = []
        self._releasers: list[Callable[[], None]] = []
        self._disposed = False

    @property
    def disposed(self) -> bool:
        return self._disposed

    def subscribe_event(
        self,
        event_bus: EventBus,
        event_type: Type,
        handler: Callable,
    ) -> Subscription:
        """Subscribe to an event type and track the subscription."""
        sub = event_bus.subscribe(event_type, handler)
        self._subscriptions.append(sub)
        return sub

    def connect_signal(self, signal: Signal, handler: Callable) -> None:
        """Connect *handler* to *signal* and disconnect it on dispose."""
        signal.connect(handler)

        def _release() -> None:
            if signal.is_connected(handler):
                signal.disconnect(handler)

        self._releasers.append(_release)

    def dispose(self) -> None:
        """Cancel all tracked subscriptions; late async results are dropped."""
        self._disposed = True
        for sub in self._subscriptions:
            sub.cancel()
        self._subscriptions.clear()
        releasers, self._releasers = self._releasers, []
        for release in releasers:
            release()
