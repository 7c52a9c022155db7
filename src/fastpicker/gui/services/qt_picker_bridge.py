"""QtPickerBridge: re-emits picker view state as Qt signals.

Qt widgets and QML items cannot connect to the pure Python ``Signal``
objects directly across threads or bind to them from QML, so this adapter
forwards each observable the coordinator exposes onto a ``QObject``.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple

from PySide6.QtCore import QObject, Signal, Slot

from fastpicker.gui.coordinators.picker_coordinator import PickerCoordinator
from fastpicker.gui.viewmodels.signal import Signal as PySignal


class QtPickerBridge(QObject):
    """Forward coordinator observables into Qt signals.

    Typical usage::

        bridge = QtPickerBridge(coordinator)
        bridge.selectionChanged.connect(grid.refresh_badges)
        # ... later ...
        bridge.dispose()
    """

    albumsChanged = Signal(list)
    selectedAlbumChanged = Signal(str)
    selectionChanged = Signal(list)
    loadingStatusChanged = Signal(str)
    permissionChanged = Signal(str, bool)
    multiSelectChanged = Signal(str)
    finished = Signal(list)
    errorOccurred = Signal(str, str)

    def __init__(self, coordinator: PickerCoordinator, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._coordinator = coordinator
        self._connections: List[Tuple[PySignal, Callable]] = []
        self._release_error_surface = coordinator.register_error_surface(
            lambda message, severity: self.errorOccurred.emit(message, severity.value)
        )

        albums = coordinator.albums
        self._forward(
            albums.albums.changed,
            lambda new, _old: self.albumsChanged.emit([album.id for album in new]),
        )
        self._forward(
            albums.selected_album.changed,
            lambda new, _old: self.selectedAlbumChanged.emit(new.id if new is not None else ""),
        )
        self._forward(
            albums.loading_status.changed,
            lambda new, _old: self.loadingStatusChanged.emit(new.value),
        )
        self._forward(
            coordinator.selection.items.changed,
            lambda new, _old: self.selectionChanged.emit([item.id for item in new]),
        )
        self._forward(
            coordinator.permission.status.changed,
            lambda new, _old: self.permissionChanged.emit(new.value, new.has_access),
        )
        self._forward(
            coordinator.multi_select.transition.state.changed,
            lambda new, _old: self.multiSelectChanged.emit(new.value),
        )
        self._forward(
            coordinator.completed,
            lambda items: self.finished.emit([item.id for item in items]),
        )

    @Slot(str)
    def selectAlbum(self, album_id: str) -> None:
        self._coordinator.select_album(album_id)

    @Slot()
    def toggleMultiSelect(self) -> None:
        self._coordinator.toggle_multi_select()

    @Slot()
    def close(self) -> None:
        self._coordinator.exit()

    def dispose(self) -> None:
        """Disconnect from every coordinator signal."""
        for signal, handler in self._connections:
            if signal.is_connected(handler):
                signal.disconnect(handler)
        self._connections.clear()
        self._release_error_surface()

    def _forward(self, signal: PySignal, handler: Callable) -> None:
        signal.connect(handler)
        self._connections.append((signal, handler))
