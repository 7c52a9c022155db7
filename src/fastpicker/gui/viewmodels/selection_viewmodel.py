"""Pure Python SelectionViewModel: no Qt dependency."""

from __future__ import annotations

import asyncio
import logging
from typing import Iterable, Optional, Sequence, Tuple

from fastpicker.application.interfaces import IMediaLibrary
from fastpicker.domain.models import MediaItem
from fastpicker.errors import InvalidMaxSelectionError
from fastpicker.gui.viewmodels.base import BaseViewModel
from fastpicker.gui.viewmodels.signal import ObservableProperty


class SelectionViewModel(BaseViewModel):
    """Ordered, capacity-bounded set of selected media items.

    The selection never holds more than ``max_selection`` items and never
    holds two items with the same id. Rejections are reported through return
    values; nothing here raises for ordinary user interaction.
    """

    def __init__(self, library: IMediaLibrary, max_selection: int) -> None:
        super().__init__()
        if isinstance(max_selection, bool) or not isinstance(max_selection, int) or max_selection < 1:
            raise InvalidMaxSelectionError(
                f"max_selection must be greater than or equal to 1, got {max_selection!r}"
            )
        self._library = library
        self._max_selection = max_selection
        self._logger = logging.getLogger(__name__)

        self.items: ObservableProperty[Tuple[MediaItem, ...]] = ObservableProperty(())

    @property
    def max_selection(self) -> int:
        return self._max_selection

    @property
    def count(self) -> int:
        return len(self.items.value)

    @property
    def is_full(self) -> bool:
        return self.count >= self._max_selection

    @property
    def is_empty(self) -> bool:
        return not self.items.value

    def contains(self, item: MediaItem) -> bool:
        return any(existing.id == item.id for existing in self.items.value)

    def index_of(self, item: MediaItem) -> Optional[int]:
        """Return the 0-based selection order of *item*, if selected."""
        for index, existing in enumerate(self.items.value):
            if existing.id == item.id:
                return index
        return None

    def toggle(self, item: MediaItem) -> bool:
        """Add or remove *item*; ``False`` means the selection was full."""

        current = self.items.value
        if self.contains(item):
            self.items.value = tuple(existing for existing in current if existing.id != item.id)
            return True
        if self.is_full:
            self._logger.debug("Rejecting %s: selection is full (%d)", item.id, self._max_selection)
            return False
        self.items.value = current + (item,)
        return True

    def clear(self) -> None:
        self.items.value = ()

    def finalize(self) -> Tuple[MediaItem, ...]:
        """Hand the current selection to the caller and forget it."""

        result = self.items.value
        self.items.value = ()
        return result

    async def restore(self, asset_ids: Sequence[str]) -> None:
        """Resolve previously selected *asset_ids* back into live items.

        Each id is looked up independently. Ids that no longer resolve, no
        longer exist or whose lookup fails are dropped; survivors keep their
        relative order.
        """

        unique_ids = [asset_id for asset_id in dict.fromkeys(asset_ids) if asset_id]
        if not unique_ids:
            return
        results = await asyncio.gather(
            *(self._resolve(asset_id) for asset_id in unique_ids),
            return_exceptions=True,
        )
        if self.disposed:
            self._logger.debug("Dropping restored selection after dispose")
            return

        restored = list(_survivors(unique_ids, results, self._logger))
        dropped = len(unique_ids) - len(restored)
        if len(restored) > self._max_selection:
            self._logger.warning(
                "Restored %d items but max_selection is %d; keeping the first %d",
                len(restored),
                self._max_selection,
                self._max_selection,
            )
            restored = restored[: self._max_selection]
        if dropped:
            self._logger.debug("Dropped %d previously selected ids", dropped)
        self.items.value = tuple(restored)

    async def _resolve(self, asset_id: str) -> Optional[MediaItem]:
        item = await self._library.lookup_by_id(asset_id)
        if item is None:
            return None
        return item if await self._library.exists(item) else None


def _survivors(
    asset_ids: Iterable[str],
    results: Iterable[object],
    logger: logging.Logger,
) -> Iterable[MediaItem]:
    for asset_id, result in zip(asset_ids, results):
        if isinstance(result, BaseException):
            logger.debug("Lookup for %s failed: %s", asset_id, result)
            continue
        if result is not None:
            yield result
