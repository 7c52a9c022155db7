from .interfaces import (
    IMediaLibrary,
    INavigator,
    IPermissionService,
    ITransitionDriver,
    ITransitionHandle,
)

__all__ = [
    "IMediaLibrary",
    "INavigator",
    "IPermissionService",
    "ITransitionDriver",
    "ITransitionHandle",
]
