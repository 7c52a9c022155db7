import asyncio
import os
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Qt needs a platform plugin; use the headless one unless one is configured.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Allow running the suite from a checkout without installing the package.
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from fastpicker.application.interfaces import IMediaLibrary, INavigator, IPermissionService
from fastpicker.domain.models import (
    AlbumDescriptor,
    MediaItem,
    PermissionStatus,
    RequestType,
)


class FakePermissionService(IPermissionService):
    """Answers with *status*, optionally waiting for ``release()`` first."""

    def __init__(self, status: PermissionStatus = PermissionStatus.AUTHORIZED, *, blocked: bool = False):
        self.status = status
        self.calls = 0
        self.error: Optional[Exception] = None
        self._gate = asyncio.Event() if blocked else None

    def release(self) -> None:
        if self._gate is not None:
            self._gate.set()

    async def request_access(self) -> PermissionStatus:
        self.calls += 1
        if self._gate is not None:
            await self._gate.wait()
        if self.error is not None:
            raise self.error
        return self.status


class FakeMediaLibrary(IMediaLibrary):
    """In-memory media library with hooks for delays and failures.

    ``albums`` maps album id to ``(name, [item ids])`` in listing order.
    ``list_albums`` snapshots the albums when called, then waits on the next
    queued gate (if any) so tests can control completion order.
    """

    def __init__(self, albums: Optional[Dict[str, tuple]] = None):
        self.albums: Dict[str, tuple] = dict(albums or {})
        self.list_gates: List[asyncio.Event] = []
        self.list_calls = 0
        self.fail_list: Optional[Exception] = None
        self.fail_assets_for: set[str] = set()
        self.missing: set[str] = set()
        self.unknown: set[str] = set()
        self.lookup_errors: set[str] = set()
        self.lookup_delays: Dict[str, float] = {}
        self.callbacks: List[Callable[[Any], None]] = []
        self.unsubscribe_calls = 0

    @staticmethod
    def item(asset_id: str) -> MediaItem:
        return MediaItem(id=asset_id)

    async def list_albums(self, request_type: RequestType) -> List[AlbumDescriptor]:
        self.list_calls += 1
        snapshot = [
            AlbumDescriptor(id=album_id, name=name, media_type=request_type, payload=list(ids))
            for album_id, (name, ids) in self.albums.items()
        ]
        if self.list_gates:
            gate = self.list_gates.pop(0)
            await gate.wait()
        if self.fail_list is not None:
            raise self.fail_list
        return snapshot

    async def fetch_thumbnail(self, album: AlbumDescriptor) -> Any:
        await asyncio.sleep(0)
        return f"thumb:{album.id}"

    async def fetch_assets(self, album: AlbumDescriptor) -> List[MediaItem]:
        await asyncio.sleep(0)
        if album.id in self.fail_assets_for:
            raise OSError(f"cannot read {album.id}")
        return [self.item(asset_id) for asset_id in album.payload]

    async def fetch_asset_count(self, album: AlbumDescriptor) -> int:
        return len(album.payload)

    async def lookup_by_id(self, asset_id: str) -> Optional[MediaItem]:
        await asyncio.sleep(self.lookup_delays.get(asset_id, 0))
        if asset_id in self.lookup_errors:
            raise RuntimeError(f"lookup failed for {asset_id}")
        if asset_id in self.unknown:
            return None
        return self.item(asset_id)

    async def exists(self, item: MediaItem) -> bool:
        return item.id not in self.missing

    def subscribe_to_changes(self, callback: Callable[[Any], None]) -> Callable[[], None]:
        self.callbacks.append(callback)

        def _unsubscribe() -> None:
            self.unsubscribe_calls += 1
            if callback in self.callbacks:
                self.callbacks.remove(callback)

        return _unsubscribe

    def emit_change(self, change: Any = None) -> None:
        for callback in list(self.callbacks):
            callback(change)


class FakeNavigator(INavigator):
    def __init__(self, can_pop: bool = True):
        self._can_pop = can_pop
        self.popped: List[Any] = []

    def can_pop(self) -> bool:
        return self._can_pop

    def pop(self, result: Any = None) -> None:
        self.popped.append(result)


@pytest.fixture
def library() -> FakeMediaLibrary:
    return FakeMediaLibrary(
        {
            "recents": ("Recents", ["a", "b", "c", "d"]),
            "camera": ("Camera", ["a", "b"]),
            "screens": ("Screenshots", ["c", "d"]),
        }
    )


@pytest.fixture
def permissions() -> FakePermissionService:
    return FakePermissionService(PermissionStatus.AUTHORIZED)


@pytest.fixture
def navigator() -> FakeNavigator:
    return FakeNavigator()


@pytest.fixture
def fake_library_cls():
    return FakeMediaLibrary


@pytest.fixture
def fake_permissions_cls():
    return FakePermissionService
