"""Services connecting picker view models to libraries and UI toolkits.

The Qt adapters live in ``qt_transition_driver`` and ``qt_picker_bridge``
and are imported explicitly so headless users do not load PySide6.
"""

from .change_subscription import ChangeSubscription
from .transition_drivers import AsyncioTransitionDriver

__all__ = [
    "AsyncioTransitionDriver",
    "ChangeSubscription",
]
