"""Custom exception hierarchy for fastpicker."""

from __future__ import annotations


class FastPickerError(Exception):
    """Base class for all custom errors raised by fastpicker."""


# --- Configuration errors ---

class ConfigurationError(FastPickerError):
    """Base class for invalid picker configuration."""


class InvalidMaxSelectionError(ConfigurationError):
    """Raised when ``max_selection`` is lower than one."""


class InvalidOptionsError(ConfigurationError):
    """Raised when picker options fail schema validation."""


# --- Media library errors ---

class MediaLibraryError(FastPickerError):
    """Base class for failures reported by a media library backend."""


class AlbumLoadError(MediaLibraryError):
    """Raised when album enumeration or a per-album fetch fails."""


# --- Permission errors ---

class PermissionRequestError(FastPickerError):
    """Raised when the permission service fails instead of answering."""


# --- Lifecycle errors ---

class CoordinatorStateError(FastPickerError):
    """Raised when the picker coordinator is driven out of order."""
