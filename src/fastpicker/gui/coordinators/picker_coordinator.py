"""PickerCoordinator: composes the picker view models into one view state."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Mapping, Optional, Sequence, Tuple, Union

from fastpicker.application.interfaces import (
    IMediaLibrary,
    INavigator,
    IPermissionService,
    ITransitionDriver,
)
from fastpicker.domain.models import Album, LoadingStatus, MediaItem, PermissionStatus
from fastpicker.errors import CoordinatorStateError
from fastpicker.errors.handler import ErrorHandler, ErrorSurface
from fastpicker.events.bus import EventBus
from fastpicker.events.picker_events import SelectionFinalizedEvent
from fastpicker.gui.background_task_manager import BackgroundTaskManager
from fastpicker.gui.services.change_subscription import ChangeSubscription
from fastpicker.gui.services.transition_drivers import AsyncioTransitionDriver
from fastpicker.gui.viewmodels.album_viewmodel import AlbumViewModel
from fastpicker.gui.viewmodels.multi_select_viewmodel import MultiSelectViewModel
from fastpicker.gui.viewmodels.permission_viewmodel import PermissionViewModel
from fastpicker.gui.viewmodels.selection_viewmodel import SelectionViewModel
from fastpicker.gui.viewmodels.signal import Signal
from fastpicker.gui.viewmodels.transition import Transition
from fastpicker.settings.options import PickerOptions
from fastpicker.settings.strings import PickerStrings

CompletionCallback = Callable[[Sequence[MediaItem]], None]


class PickerCoordinator:
    """Own the picker lifecycle from mount to exit.

    Typical usage (inside a running event loop)::

        picker = PickerCoordinator(options, permissions, library, navigator=nav,
                                   on_complete=handle_selection)
        picker.mount()
        ...
        picker.exit()      # close button or back gesture
        picker.unmount()   # view torn down
    """

    def __init__(
        self,
        options: Union[PickerOptions, Mapping[str, Any]],
        permission_service: IPermissionService,
        library: IMediaLibrary,
        *,
        navigator: Optional[INavigator] = None,
        on_complete: Optional[CompletionCallback] = None,
        strings: Optional[PickerStrings] = None,
        event_bus: Optional[EventBus] = None,
        transition_driver: Optional[ITransitionDriver] = None,
        has_custom_close_button: bool = False,
    ) -> None:
        if not isinstance(options, PickerOptions):
            options = PickerOptions.from_mapping(options)
        self._options = options
        self._navigator = navigator
        self._on_complete = on_complete
        self._has_custom_close_button = has_custom_close_button
        self.strings = strings or PickerStrings()
        self._logger = logging.getLogger(__name__)
        self._event_bus = event_bus or EventBus()
        self._tasks = BackgroundTaskManager()
        self._errors = ErrorHandler(self._logger, self._event_bus)
        self._mounted = False
        self._unmounted = False
        self._exited = False

        driver = transition_driver if transition_driver is not None else AsyncioTransitionDriver()
        timings = {
            "driver": driver,
            "duration_ms": options.transition_duration_ms,
            "reverse_duration_ms": options.transition_reverse_duration_ms,
        }

        self.permission = PermissionViewModel(
            permission_service, self._event_bus, error_handler=self._errors, **timings
        )
        self.albums = AlbumViewModel(
            library,
            self._event_bus,
            self._errors,
            request_type=options.request_type,
            **timings,
        )
        self.selection = SelectionViewModel(library, options.max_selection)
        self.multi_select = MultiSelectViewModel(
            self.selection,
            initially_active=options.starts_in_multi_select,
            **timings,
        )
        self.changes = ChangeSubscription(library, self.albums, self._tasks, self._event_bus)

        # Emits the finalized selection once, when the picker exits.
        self.completed = Signal()

    # ------------------------------------------------------------------
    # Exposed view state
    # ------------------------------------------------------------------
    @property
    def options(self) -> PickerOptions:
        return self._options

    @property
    def event_bus(self) -> EventBus:
        return self._event_bus

    @property
    def error_handler(self) -> ErrorHandler:
        return self._errors

    @property
    def is_mounted(self) -> bool:
        return self._mounted and not self._unmounted

    @property
    def has_exited(self) -> bool:
        return self._exited

    @property
    def permission_status(self) -> PermissionStatus:
        return self.permission.status.value

    @property
    def toolbar_visible(self) -> bool:
        return self.permission.has_access.value

    @property
    def limited_banner(self) -> Transition:
        return self.permission.limited_banner

    @property
    def denied_banner(self) -> Transition:
        return self.permission.denied_banner

    @property
    def album_panel(self) -> Transition:
        return self.albums.panel

    @property
    def album_list(self) -> Tuple[Album, ...]:
        return self.albums.albums.value

    @property
    def selected_album(self) -> Optional[Album]:
        return self.albums.selected_album.value

    @property
    def loading_status(self) -> LoadingStatus:
        return self.albums.loading_status.value

    @property
    def selected_items(self) -> Tuple[MediaItem, ...]:
        return self.selection.items.value

    @property
    def title(self) -> str:
        album = self.selected_album
        return album.name if album is not None else self.strings.select_media

    @property
    def selection_label(self) -> str:
        return self.strings.format_selection(self.selection.count, self.selection.max_selection)

    @property
    def show_close_button(self) -> bool:
        if self._has_custom_close_button:
            return True
        return self._navigator is not None and self._navigator.can_pop()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def mount(self) -> None:
        """Start the permission request; must run inside an event loop."""

        if self._mounted:
            raise CoordinatorStateError("picker is already mounted")
        try:
            asyncio.get_running_loop()
        except RuntimeError as exc:
            raise CoordinatorStateError("mount() requires a running event loop") from exc
        self._mounted = True

        self.permission.connect_signal(self.permission.has_access.changed, self._on_access_changed)
        self.changes.bind(self.permission)
        self._tasks.submit("request-permission", self.permission.request_access())

    def unmount(self) -> None:
        """Release every listener; in-flight results are discarded."""

        if self._unmounted:
            return
        self._unmounted = True
        self._tasks.shutdown()
        self.changes.dispose()
        self.multi_select.dispose()
        self.selection.dispose()
        self.albums.dispose()
        self.permission.dispose()
        self._logger.debug("Picker unmounted")

    def register_error_surface(self, surface: ErrorSurface) -> Callable[[], None]:
        """Show failed album loads in the view; returns an unregister function."""

        return self._errors.register_ui_callback(surface)

    async def wait_idle(self) -> None:
        """Wait for the permission request, reloads and restores to settle."""

        await self._tasks.wait_idle()

    # ------------------------------------------------------------------
    # User interaction
    # ------------------------------------------------------------------
    def tap(self, item: MediaItem) -> bool:
        """Handle a tap on a grid cell.

        In multi-select mode the item is toggled and the toggle result is
        returned; otherwise the picker completes with just that item. Taps
        after the picker has exited are ignored and return ``False``.
        """

        if self._exited:
            return False
        if self.multi_select.is_active:
            return self.selection.toggle(item)
        self.selection.clear()
        self.selection.toggle(item)
        self.exit()
        return True

    def toggle_multi_select(self) -> None:
        if not self._exited:
            self.multi_select.toggle()

    def toggle_album_panel(self) -> None:
        if not self._exited:
            self.albums.toggle_panel()

    def select_album(self, album_id: str) -> None:
        if not self._exited:
            self.albums.select_album(album_id)

    def reload(self) -> None:
        """Retry hook for views that surface album load failures."""

        if self.toolbar_visible:
            self._tasks.submit("reload-albums", self.albums.reload())

    def exit(self) -> Tuple[MediaItem, ...]:
        """Finish the picker: notify the caller, then pop exactly once."""

        if self._exited:
            return ()
        self._exited = True
        items = self.selection.finalize()
        self._logger.info("Picker finished with %d items", len(items))
        self._event_bus.publish(SelectionFinalizedEvent(asset_ids=[item.id for item in items]))
        self.completed.emit(items)
        try:
            if self._on_complete is not None:
                self._on_complete(list(items))
        finally:
            if self._navigator is not None:
                self._navigator.pop(list(items))
        return items

    def handle_pop_gesture(self, did_pop: bool) -> None:
        """Outer dismissal (back button/swipe) forwarded by the host."""

        if did_pop:
            return
        self.exit()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _on_access_changed(self, has_access: bool, _old: bool) -> None:
        if not has_access or self._unmounted:
            return
        self._tasks.submit("reload-albums", self.albums.reload())
        self._tasks.submit(
            "restore-selection", self.selection.restore(self._options.selected_asset_ids)
        )
