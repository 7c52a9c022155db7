import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

from fastpicker.events.bus import Event, EventBus

ErrorSurface = Callable[[str, "ErrorSeverity"], None]


class ErrorSeverity(Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        return list(ErrorSeverity).index(self)


@dataclass(kw_only=True)
class ErrorOccurredEvent(Event):
    error: Exception
    severity: ErrorSeverity
    context: dict = field(default_factory=dict)


class ErrorHandler:
    """Absorb failures from background picker work.

    Every handled error is logged at its severity and published as an
    :class:`ErrorOccurredEvent`. Errors at or above *surface_threshold* are
    also passed to each registered surface (a Qt bridge, a console), which
    is how the view learns about a failed album load without the task that
    hit it raising.
    """

    def __init__(
        self,
        logger: logging.Logger,
        event_bus: EventBus,
        *,
        surface_threshold: ErrorSeverity = ErrorSeverity.ERROR,
    ):
        self._logger = logger
        self._events = event_bus
        self._threshold = surface_threshold
        self._surfaces: List[ErrorSurface] = []

    @property
    def surface_count(self) -> int:
        return len(self._surfaces)

    def register_ui_callback(self, callback: ErrorSurface) -> Callable[[], None]:
        """Add a surface; the returned function removes it again."""
        self._surfaces.append(callback)

        def _release() -> None:
            if callback in self._surfaces:
                self._surfaces.remove(callback)

        return _release

    def handle(
        self,
        error: Exception,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: Optional[dict] = None,
    ) -> ErrorOccurredEvent:
        context = dict(context or {})
        log_method = getattr(self._logger, severity.value, self._logger.error)
        log_method("%s: %s", error.__class__.__name__, error, extra={"context": context})

        event = ErrorOccurredEvent(error=error, severity=severity, context=context)
        self._events.publish(event)

        if severity.rank >= self._threshold.rank:
            message = str(error) or error.__class__.__name__
            for surface in list(self._surfaces):
                try:
                    surface(message, severity)
                except Exception:
                    self._logger.exception("Error surface %r failed", surface)
        return event
