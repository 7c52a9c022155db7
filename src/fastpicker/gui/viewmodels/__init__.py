from .signal import Signal, ObservableProperty
from .base import BaseViewModel
from .transition import Transition, TransitionState
from .permission_viewmodel import PermissionViewModel
from .album_viewmodel import AlbumViewModel
from .selection_viewmodel import SelectionViewModel
from .multi_select_viewmodel import MultiSelectViewModel

__all__ = [
    "AlbumViewModel",
    "BaseViewModel",
    "MultiSelectViewModel",
    "ObservableProperty",
    "PermissionViewModel",
    "SelectionViewModel",
    "Signal",
    "Transition",
    "TransitionState",
]
