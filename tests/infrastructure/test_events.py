import logging
from dataclasses import dataclass
from unittest.mock import Mock

from fastpicker.events.bus import Event, EventBus
from fastpicker.events.picker_events import AlbumsReloadedEvent, SelectionFinalizedEvent


@dataclass(kw_only=True)
class SimpleEvent(Event):
    payload: str = ""


def test_subscribe_publish():
    bus = EventBus()
    received = []

    bus.subscribe(SimpleEvent, lambda event: received.append(event.payload))
    bus.publish(SimpleEvent(payload="hello"))

    assert received == ["hello"]


def test_handlers_only_receive_their_event_type():
    bus = EventBus()
    received = []
    bus.subscribe(SelectionFinalizedEvent, received.append)

    bus.publish(AlbumsReloadedEvent(album_ids=["recents"], selected_album_id="recents", generation=1))
    bus.publish(SelectionFinalizedEvent(asset_ids=["a"]))

    assert [event.asset_ids for event in received] == [["a"]]


def test_unsubscribe_and_cancel_stop_delivery():
    bus = EventBus()
    received = []
    first = bus.subscribe(SimpleEvent, received.append)
    second = bus.subscribe(SimpleEvent, received.append)
    assert bus.subscriber_count(SimpleEvent) == 2

    bus.unsubscribe(first)
    second.cancel()
    bus.publish(SimpleEvent(payload="ignored"))

    assert received == []
    assert bus.subscriber_count(SimpleEvent) == 0


def test_failing_handler_does_not_block_others():
    logger = Mock(spec=logging.Logger)
    bus = EventBus(logger)
    received = []

    def broken(_event):
        raise RuntimeError("boom")

    bus.subscribe(SimpleEvent, broken)
    bus.subscribe(SimpleEvent, lambda event: received.append(event.payload))
    bus.publish(SimpleEvent(payload="still delivered"))

    assert received == ["still delivered"]
    logger.error.assert_called_once()


def test_events_carry_identity():
    first = SimpleEvent()
    second = SimpleEvent()

    assert first.event_id != second.event_id
    assert first.timestamp is not None
