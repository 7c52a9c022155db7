"""Pure Python AlbumViewModel: no Qt dependency.

Owns the album list shown by the picker, the loading status and the
pointer to the currently selected album.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional, Tuple

from fastpicker.application.interfaces import IMediaLibrary, ITransitionDriver
from fastpicker.config import TRANSITION_DURATION_MS, TRANSITION_REVERSE_DURATION_MS
from fastpicker.domain.models import Album, AlbumDescriptor, LoadingStatus, RequestType
from fastpicker.errors import AlbumLoadError
from fastpicker.errors.handler import ErrorHandler
from fastpicker.events.bus import EventBus
from fastpicker.events.picker_events import AlbumsReloadedEvent
from fastpicker.gui.viewmodels.base import BaseViewModel
from fastpicker.gui.viewmodels.signal import ObservableProperty, Signal
from fastpicker.gui.viewmodels.transition import Transition


class AlbumViewModel(BaseViewModel):
    """Album list repository for a single picker.

    ``reload()`` may be called while another reload is still running. Calls
    are neither cancelled nor coalesced: whichever finishes last publishes
    last, even if it was issued first. The selected album is tracked by id
    and re-resolved against every freshly published list.
    """

    def __init__(
        self,
        library: IMediaLibrary,
        event_bus: EventBus,
        error_handler: ErrorHandler,
        *,
        request_type: RequestType = RequestType.ALL,
        driver: Optional[ITransitionDriver] = None,
        duration_ms: int = TRANSITION_DURATION_MS,
        reverse_duration_ms: int = TRANSITION_REVERSE_DURATION_MS,
    ) -> None:
        super().__init__()
        self._library = library
        self._event_bus = event_bus
        self._errors = error_handler
        self._request_type = request_type
        self._logger = logging.getLogger(__name__)
        self._issued = 0
        self._published = 0

        self.albums: ObservableProperty[Tuple[Album, ...]] = ObservableProperty(())
        self.selected_album: ObservableProperty[Optional[Album]] = ObservableProperty(None)
        self.loading_status = ObservableProperty(LoadingStatus.INDETERMINATE)
        self.load_failed = Signal()

        # Album list overlay shown over the media grid.
        self.panel = Transition(
            duration_ms=duration_ms,
            reverse_duration_ms=reverse_duration_ms,
            driver=driver,
            name="album-panel",
        )

    @property
    def selected_album_id(self) -> Optional[str]:
        album = self.selected_album.value
        return album.id if album is not None else None

    def album_by_id(self, album_id: str) -> Optional[Album]:
        return next((a for a in self.albums.value if a.id == album_id), None)

    async def reload(self) -> None:
        """Fetch every album and publish the new list in one assignment."""

        if self.disposed:
            return
        self._issued += 1
        generation = self._issued

        if not self.albums.value:
            self.loading_status.value = LoadingStatus.LOADING

        try:
            albums = await self._fetch_albums()
        except Exception as exc:
            if self.disposed:
                return
            error = exc if isinstance(exc, AlbumLoadError) else AlbumLoadError(str(exc))
            self._errors.handle(error, context={"generation": generation})
            self.load_failed.emit(error)
            return

        if self.disposed:
            self._logger.debug("Dropping album reload #%d after dispose", generation)
            return
        self._publish(albums, generation)

    def select_album(self, album_id: str) -> None:
        """Make *album_id* current and close the album panel."""

        album = self.album_by_id(album_id)
        if album is None:
            self._logger.warning("Ignoring selection of unknown album %s", album_id)
            return
        self.selected_album.value = album
        self.panel.reverse()

    def toggle_panel(self) -> None:
        self.panel.toggle()

    def dispose(self) -> None:
        super().dispose()
        self.panel.stop()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    async def _fetch_albums(self) -> Tuple[Album, ...]:
        descriptors = await self._library.list_albums(self._request_type)
        albums = await asyncio.gather(*(self._fetch_album(d) for d in descriptors))
        return tuple(albums)

    async def _fetch_album(self, descriptor: AlbumDescriptor) -> Album:
        thumbnail, assets, count = await asyncio.gather(
            self._library.fetch_thumbnail(descriptor),
            self._library.fetch_assets(descriptor),
            self._library.fetch_asset_count(descriptor),
        )
        return Album.from_descriptor(
            descriptor,
            thumbnail=thumbnail,
            assets=tuple(assets),
            asset_count=count,
        )

    def _publish(self, albums: Tuple[Album, ...], generation: int) -> None:
        if generation < self._published:
            self._logger.debug(
                "Reload #%d finished after #%d and overwrites it", generation, self._published
            )
        self._published = max(self._published, generation)

        previous_id = self.selected_album_id
        # Album equality ignores thumbnails, so force the fresh objects in.
        self.albums.set(albums, force=True)
        if albums:
            resolved = None
            if previous_id is not None:
                resolved = next((a for a in albums if a.id == previous_id), None)
            self.selected_album.set(resolved or albums[0], force=True)
        else:
            self.selected_album.value = None

        if self.loading_status.value is LoadingStatus.LOADING:
            self.loading_status.value = LoadingStatus.COMPLETE

        self._logger.debug("Published %d albums (reload #%d)", len(albums), generation)
        self._event_bus.publish(
            AlbumsReloadedEvent(
                album_ids=[a.id for a in albums],
                selected_album_id=self.selected_album_id,
                generation=generation,
            )
        )
