"""Event-loop based transition driver."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional

from fastpicker.application.interfaces import ITransitionDriver, ITransitionHandle

_logger = logging.getLogger(__name__)


class _TimerHandle(ITransitionHandle):
    def __init__(self, handle: Optional[asyncio.TimerHandle]) -> None:
        self._handle = handle

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None


class AsyncioTransitionDriver(ITransitionDriver):
    """Finish each phase after its duration on the running asyncio loop.

    Only the end value is reported; headless callers have nothing to paint
    in between.
    """

    def schedule(
        self,
        duration_ms: int,
        start: float,
        end: float,
        on_progress: Callable[[float], None],
        on_finished: Callable[[], None],
    ) -> ITransitionHandle:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            _logger.debug("No running loop; finishing %d ms transition immediately", duration_ms)
            on_progress(end)
            on_finished()
            return _TimerHandle(None)

        def _fire() -> None:
            on_progress(end)
            on_finished()

        return _TimerHandle(loop.call_later(duration_ms / 1000.0, _fire))
