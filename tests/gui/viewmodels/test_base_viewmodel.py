"""Tests for BaseViewModel: pure Python, no Qt dependency."""

from dataclasses import dataclass

from fastpicker.events.bus import Event, EventBus
from fastpicker.gui.viewmodels.base import BaseViewModel
from fastpicker.gui.viewmodels.signal import Signal


@dataclass(kw_only=True)
class _FakeEvent(Event):
    payload: str = ""


class TestBaseViewModel:
    def test_dispose_cancels_event_subscriptions(self):
        bus = EventBus()
        vm = BaseViewModel()
        received = []

        vm.subscribe_event(bus, _FakeEvent, lambda e: received.append(e.payload))
        bus.publish(_FakeEvent(payload="before"))
        vm.dispose()
        bus.publish(_FakeEvent(payload="after"))

        assert received == ["before"]
        assert bus.subscriber_count(_FakeEvent) == 0

    def test_dispose_disconnects_signals(self):
        sig = Signal()
        vm = BaseViewModel()
        received = []

        vm.connect_signal(sig, received.append)
        sig.emit(1)
        vm.dispose()
        sig.emit(2)

        assert received == [1]
        assert sig.handler_count == 0

    def test_dispose_tolerates_handlers_removed_elsewhere(self):
        sig = Signal()
        vm = BaseViewModel()
        handler = lambda v: None

        vm.connect_signal(sig, handler)
        sig.disconnect(handler)
        vm.dispose()

        assert vm.disposed
