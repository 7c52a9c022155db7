"""Directory-backed implementation of :class:`IMediaLibrary`."""

from __future__ import annotations

import asyncio
import logging
import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from fastpicker.application.interfaces import IMediaLibrary
from fastpicker.config import RECENTS_ALBUM_ID, RECENTS_ALBUM_NAME
from fastpicker.domain.models import (
    AlbumDescriptor,
    AlbumKind,
    MediaItem,
    RequestType,
)
from fastpicker.errors import AlbumLoadError
from fastpicker.media_classifier import classify_path, is_media

_EPOCH = datetime.fromtimestamp(0)


@dataclass(frozen=True)
class _Entry:
    rel: str
    path: Path
    modified: datetime


class FolderMediaLibrary(IMediaLibrary):
    """Expose a directory tree as a media library.

    The first album is a "Recents" smart album holding every media file
    under *root*, newest first. It is followed by one folder album per
    directory that directly contains media, ordered by relative path. Item
    ids are POSIX paths relative to *root*; hidden files and directories are
    skipped.
    """

    def __init__(self, root: Path, *, recents_name: str = RECENTS_ALBUM_NAME) -> None:
        self._root = Path(root).expanduser().resolve()
        self._recents_name = recents_name
        self._subscribers: List[Callable[[Any], None]] = []
        self._logger = logging.getLogger(__name__)

    @property
    def root(self) -> Path:
        return self._root

    # ------------------------------------------------------------------
    # Album enumeration
    # ------------------------------------------------------------------
    async def list_albums(self, request_type: RequestType) -> List[AlbumDescriptor]:
        return await asyncio.to_thread(self._list_albums, request_type)

    async def fetch_thumbnail(self, album: AlbumDescriptor) -> Optional[Path]:
        entries: List[_Entry] = album.payload or []
        return entries[0].path if entries else None

    async def fetch_assets(self, album: AlbumDescriptor) -> List[MediaItem]:
        entries: List[_Entry] = album.payload or []
        return [self._to_item(entry) for entry in entries]

    async def fetch_asset_count(self, album: AlbumDescriptor) -> int:
        return len(album.payload or [])

    # ------------------------------------------------------------------
    # Item lookup
    # ------------------------------------------------------------------
    async def lookup_by_id(self, asset_id: str) -> Optional[MediaItem]:
        path = (self._root / asset_id).resolve()
        if not path.is_relative_to(self._root) or not is_media(path):
            return None
        modified = await asyncio.to_thread(_mtime, path)
        return MediaItem(
            id=path.relative_to(self._root).as_posix(),
            media_type=classify_path(path),
            created_at=modified,
            payload=path,
        )

    async def exists(self, item: MediaItem) -> bool:
        path = item.payload if isinstance(item.payload, Path) else self._root / item.id
        return await asyncio.to_thread(path.is_file)

    # ------------------------------------------------------------------
    # Change notifications
    # ------------------------------------------------------------------
    def subscribe_to_changes(self, callback: Callable[[Any], None]) -> Callable[[], None]:
        self._subscribers.append(callback)

        def _unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return _unsubscribe

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def notify_changed(self, change: Any = None) -> None:
        """Tell subscribers the tree changed; call on the event loop thread."""

        for callback in list(self._subscribers):
            callback(change)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _list_albums(self, request_type: RequestType) -> List[AlbumDescriptor]:
        if not self._root.is_dir():
            raise AlbumLoadError(f"Library root is not a directory: {self._root}")

        folders: Dict[str, List[_Entry]] = {}
        for dirpath, dirnames, filenames in os.walk(self._root):
            dirnames[:] = sorted(d for d in dirnames if not d.startswith("."))
            directory = Path(dirpath)
            for name in sorted(filenames):
                if name.startswith("."):
                    continue
                path = directory / name
                if not request_type.accepts(classify_path(path)):
                    continue
                entry = _Entry(
                    rel=path.relative_to(self._root).as_posix(),
                    path=path,
                    modified=_mtime(path) or _EPOCH,
                )
                folder_rel = directory.relative_to(self._root).as_posix()
                folders.setdefault(folder_rel, []).append(entry)

        everything = sorted(
            (entry for entries in folders.values() for entry in entries),
            key=lambda entry: (entry.modified, entry.rel),
            reverse=True,
        )
        albums = [
            AlbumDescriptor(
                id=RECENTS_ALBUM_ID,
                name=self._recents_name,
                kind=AlbumKind.SMART,
                last_modified=everything[0].modified if everything else None,
                media_type=request_type,
                payload=everything,
            )
        ]
        for folder_rel in sorted(folders):
            entries = folders[folder_rel]
            name = self._root.name if folder_rel == "." else Path(folder_rel).name
            albums.append(
                AlbumDescriptor(
                    id=f"folder:{folder_rel}",
                    name=name,
                    kind=AlbumKind.FOLDER,
                    last_modified=max(entry.modified for entry in entries),
                    media_type=request_type,
                    payload=entries,
                )
            )
        self._logger.debug("Found %d albums under %s", len(albums), self._root)
        return albums

    def _to_item(self, entry: _Entry) -> MediaItem:
        return MediaItem(
            id=entry.rel,
            media_type=classify_path(entry.path),
            created_at=entry.modified,
            payload=entry.path,
        )


def _mtime(path: Path) -> Optional[datetime]:
    try:
        return datetime.fromtimestamp(path.stat().st_mtime)
    except OSError:
        return None
