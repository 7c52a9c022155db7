"""Media type classification helpers shared by library backends."""

from __future__ import annotations

import mimetypes
from pathlib import Path

from .domain.models import MediaType

IMAGE_EXTENSIONS: frozenset[str] = frozenset({
    ".jpg",
    ".jpeg",
    ".png",
    ".gif",
    ".webp",
    ".heic",
    ".heif",
})

VIDEO_EXTENSIONS: frozenset[str] = frozenset({
    ".mov",
    ".mp4",
    ".m4v",
    ".qt",
    ".avi",
    ".wmv",
    ".mkv",
})


def classify_path(path: Path) -> MediaType:
    """Return the media type of *path* judging by its name.

    Known extensions win over the MIME registry; some platforms report
    QuickTime containers as images.
    """

    suffix = path.suffix.lower()
    if suffix in VIDEO_EXTENSIONS:
        return MediaType.VIDEO
    if suffix in IMAGE_EXTENSIONS:
        return MediaType.IMAGE

    mime, _encoding = mimetypes.guess_type(path.name)
    if mime:
        if mime.startswith("image/"):
            return MediaType.IMAGE
        if mime.startswith("video/"):
            return MediaType.VIDEO
    return MediaType.OTHER


def is_media(path: Path) -> bool:
    return classify_path(path) is not MediaType.OTHER
