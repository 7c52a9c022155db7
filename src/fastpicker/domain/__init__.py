from .models import (
    Album,
    AlbumDescriptor,
    AlbumKind,
    LoadingStatus,
    MediaItem,
    MediaType,
    PermissionStatus,
    RequestType,
)

__all__ = [
    "Album",
    "AlbumDescriptor",
    "AlbumKind",
    "LoadingStatus",
    "MediaItem",
    "MediaType",
    "PermissionStatus",
    "RequestType",
]
