from .bus import Event, EventBus, Subscription
from .picker_events import (
    AlbumsReloadedEvent,
    LibraryChangedEvent,
    PermissionResolvedEvent,
    SelectionFinalizedEvent,
)

__all__ = [
    "AlbumsReloadedEvent",
    "Event",
    "EventBus",
    "LibraryChangedEvent",
    "PermissionResolvedEvent",
    "SelectionFinalizedEvent",
    "Subscription",
]
