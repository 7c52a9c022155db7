"""Keep the album list in sync with external media library changes."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from fastpicker.application.interfaces import IMediaLibrary
from fastpicker.events.bus import EventBus
from fastpicker.events.picker_events import LibraryChangedEvent
from fastpicker.gui.background_task_manager import BackgroundTaskManager
from fastpicker.gui.viewmodels.album_viewmodel import AlbumViewModel
from fastpicker.gui.viewmodels.base import BaseViewModel
from fastpicker.gui.viewmodels.permission_viewmodel import PermissionViewModel


class ChangeSubscription(BaseViewModel):
    """Listen for library changes while access is granted.

    Every notification triggers a full album reload. The library listener is
    an acquired resource: it is released when access goes away and on
    ``dispose()``, whichever comes first.
    """

    def __init__(
        self,
        library: IMediaLibrary,
        albums: AlbumViewModel,
        tasks: BackgroundTaskManager,
        event_bus: EventBus,
    ) -> None:
        super().__init__()
        self._library = library
        self._albums = albums
        self._tasks = tasks
        self._event_bus = event_bus
        self._logger = logging.getLogger(__name__)
        self._unsubscribe: Optional[Callable[[], None]] = None

    @property
    def is_active(self) -> bool:
        return self._unsubscribe is not None

    def bind(self, permission: PermissionViewModel) -> None:
        """Follow ``permission.has_access``, subscribing while it is true."""

        self.connect_signal(permission.has_access.changed, self._on_access_changed)
        if permission.has_access.value:
            self.subscribe()

    def subscribe(self) -> Callable[[], None]:
        if self.disposed:
            return lambda: None
        if self._unsubscribe is None:
            self._unsubscribe = self._library.subscribe_to_changes(self._on_library_changed)
            self._logger.debug("Subscribed to media library changes")
        return self.unsubscribe

    def unsubscribe(self) -> None:
        release, self._unsubscribe = self._unsubscribe, None
        if release is not None:
            release()
            self._logger.debug("Unsubscribed from media library changes")

    def dispose(self) -> None:
        self.unsubscribe()
        super().dispose()

    def _on_access_changed(self, has_access: bool, _old: bool) -> None:
        if has_access:
            self.subscribe()
        else:
            self.unsubscribe()

    def _on_library_changed(self, change: Any = None) -> None:
        if self.disposed or self._unsubscribe is None:
            return
        self._logger.debug("Media library changed; reloading albums")
        self._event_bus.publish(LibraryChangedEvent(source=type(self._library).__name__))
        self._tasks.submit("reload-albums", self._albums.reload())
