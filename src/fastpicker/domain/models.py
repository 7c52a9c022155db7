from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional, Tuple


class PermissionStatus(str, Enum):
    NOT_DETERMINED = "not_determined"
    AUTHORIZED = "authorized"
    LIMITED = "limited"
    DENIED = "denied"
    RESTRICTED = "restricted"

    @property
    def has_access(self) -> bool:
        return self in (PermissionStatus.AUTHORIZED, PermissionStatus.LIMITED)


class RequestType(str, Enum):
    """Which kinds of media the library should enumerate."""

    IMAGE = "image"
    VIDEO = "video"
    ALL = "all"

    def accepts(self, media_type: MediaType) -> bool:
        if media_type is MediaType.OTHER:
            return False
        return self is RequestType.ALL or media_type.value == self.value


class MediaType(str, Enum):
    IMAGE = "image"
    VIDEO = "video"
    OTHER = "other"


class AlbumKind(str, Enum):
    ALBUM = "album"
    FOLDER = "folder"
    SMART = "smart"


class LoadingStatus(str, Enum):
    INDETERMINATE = "indeterminate"
    LOADING = "loading"
    COMPLETE = "complete"


@dataclass(frozen=True)
class MediaItem:
    id: str
    media_type: MediaType = MediaType.IMAGE
    created_at: Optional[datetime] = None
    # Backend specific handle (a path, a platform asset object...).
    payload: Any = field(default=None, compare=False, hash=False, repr=False)


@dataclass(frozen=True)
class AlbumDescriptor:
    """An album as enumerated by the library, before its contents are fetched."""

    id: str
    name: str
    kind: AlbumKind = AlbumKind.ALBUM
    last_modified: Optional[datetime] = None
    media_type: RequestType = RequestType.ALL
    payload: Any = field(default=None, compare=False, hash=False, repr=False)


@dataclass(frozen=True)
class Album:
    id: str
    name: str
    kind: AlbumKind = AlbumKind.ALBUM
    last_modified: Optional[datetime] = None
    media_type: RequestType = RequestType.ALL
    thumbnail: Any = field(default=None, compare=False)
    assets: Tuple[MediaItem, ...] = ()
    asset_count: int = 0

    def __post_init__(self) -> None:
        if self.asset_count < 0:
            raise ValueError(f"asset_count must be >= 0, got {self.asset_count}")

    @classmethod
    def from_descriptor(
        cls,
        descriptor: AlbumDescriptor,
        *,
        thumbnail: Any,
        assets: Tuple[MediaItem, ...],
        asset_count: int,
    ) -> Album:
        return cls(
            id=descriptor.id,
            name=descriptor.name,
            kind=descriptor.kind,
            last_modified=descriptor.last_modified,
            media_type=descriptor.media_type,
            thumbnail=thumbnail,
            assets=tuple(assets),
            asset_count=asset_count,
        )

    @property
    def is_empty(self) -> bool:
        return self.asset_count == 0
