"""Default configuration values for fastpicker."""

from __future__ import annotations

from typing import Final

# Forward (enter) and reverse (exit) durations shared by every picker
# transition: the multi-select mode, the album panel and both permission
# banners.
TRANSITION_DURATION_MS: Final[int] = 250
TRANSITION_REVERSE_DURATION_MS: Final[int] = 200

# Libraries list the "Recents" smart album first; the picker relies on that
# ordering when it chooses a default album.
RECENTS_ALBUM_ID: Final[str] = "recents"
RECENTS_ALBUM_NAME: Final[str] = "Recents"

DEFAULT_REQUEST_TYPE: Final[str] = "all"
DEFAULT_MAX_SELECTION: Final[int] = 1

# Handler name used by the CLI when it installs a console logger.
CONSOLE_LOGGER_NAME: Final[str] = "fastpicker-console"
