from dataclasses import dataclass, field
from typing import Optional

from .bus import Event


@dataclass(kw_only=True)
class PermissionResolvedEvent(Event):
    status: str = ""
    has_access: bool = False


@dataclass(kw_only=True)
class AlbumsReloadedEvent(Event):
    album_ids: list[str] = field(default_factory=list)
    selected_album_id: Optional[str] = None
    generation: int = 0


@dataclass(kw_only=True)
class LibraryChangedEvent(Event):
    source: str = ""


@dataclass(kw_only=True)
class SelectionFinalizedEvent(Event):
    asset_ids: list[str] = field(default_factory=list)
