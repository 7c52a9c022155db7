from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional

from fastpicker.domain.models import (
    AlbumDescriptor,
    MediaItem,
    PermissionStatus,
    RequestType,
)


class IPermissionService(ABC):
    """Interface to the platform permission subsystem."""

    @abstractmethod
    async def request_access(self) -> PermissionStatus:
        """Ask the user (or the platform) for media library access."""
        pass


class IMediaLibrary(ABC):
    """Interface to the platform media library."""

    @abstractmethod
    async def list_albums(self, request_type: RequestType) -> List[AlbumDescriptor]:
        """
        Enumerate albums containing media of *request_type*.
        The "Recents" album, when the library has one, is listed first.
        """
        pass

    @abstractmethod
    async def fetch_thumbnail(self, album: AlbumDescriptor) -> Any:
        """Return an opaque thumbnail handle for *album*."""
        pass

    @abstractmethod
    async def fetch_assets(self, album: AlbumDescriptor) -> List[MediaItem]:
        """Return every media item in *album*, in display order."""
        pass

    @abstractmethod
    async def fetch_asset_count(self, album: AlbumDescriptor) -> int:
        pass

    @abstractmethod
    async def lookup_by_id(self, asset_id: str) -> Optional[MediaItem]:
        """Resolve *asset_id* to a live item, or ``None`` if unknown."""
        pass

    @abstractmethod
    async def exists(self, item: MediaItem) -> bool:
        pass

    @abstractmethod
    def subscribe_to_changes(self, callback: Callable[[Any], None]) -> Callable[[], None]:
        """
        Register *callback* for library change notifications.
        Returns a function that removes the registration.
        """
        pass


class INavigator(ABC):
    """Interface to the host navigation stack that presented the picker."""

    @abstractmethod
    def can_pop(self) -> bool:
        pass

    @abstractmethod
    def pop(self, result: Any = None) -> None:
        pass


class ITransitionHandle(ABC):
    @abstractmethod
    def cancel(self) -> None:
        pass


class ITransitionDriver(ABC):
    """Turns a transition phase into a timed completion."""

    @abstractmethod
    def schedule(
        self,
        duration_ms: int,
        start: float,
        end: float,
        on_progress: Callable[[float], None],
        on_finished: Callable[[], None],
    ) -> ITransitionHandle:
        """
        Animate from *start* to *end* over *duration_ms*, reporting values to
        *on_progress* and calling *on_finished* once unless cancelled.
        """
        pass
