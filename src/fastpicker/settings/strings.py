"""User-facing labels, overridable by the caller for localisation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PickerStrings:
    select_media: str = "Select Media"
    recents: str = "Recents"
    select: str = "Select"
    cancel: str = "Cancel"
    done: str = "Done"
    limited_access_message: str = (
        "You've given access to a limited number of photos and videos."
    )
    manage: str = "Manage"
    permission_denied_title: str = "Allow access to your photos"
    permission_denied_message: str = (
        "Access to your photo library is needed to select photos and videos."
    )
    open_settings: str = "Open Settings"
    no_media: str = "No photos or videos"
    selection_counter: str = "{count}/{max}"

    def format_selection(self, count: int, maximum: int) -> str:
        return self.selection_counter.format(count=count, max=maximum)
