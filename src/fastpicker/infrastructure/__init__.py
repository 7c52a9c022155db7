from .folder_library import FolderMediaLibrary
from .permission import StaticPermissionService

__all__ = ["FolderMediaLibrary", "StaticPermissionService"]
