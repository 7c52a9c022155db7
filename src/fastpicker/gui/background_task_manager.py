"""Utility that centralises background task submission for the picker."""

from __future__ import annotations

import asyncio
import itertools
import logging
from dataclasses import dataclass
from typing import Awaitable, Dict, Optional

from fastpicker.gui.viewmodels.signal import Signal


@dataclass
class _TaskRecord:
    """Internal bookkeeping structure for a tracked background task."""

    name: str
    task: asyncio.Task


class BackgroundTaskManager:
    """Track asyncio tasks spawned on behalf of the picker coordinator.

    Tasks are never cancelled: once the picker is torn down the view models
    drop late results themselves. The manager only makes sure failures are
    logged and lets callers wait until all tracked work has settled.
    """

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(__name__)
        self._active: Dict[str, _TaskRecord] = {}
        self._counter = itertools.count(1)
        self._closed = False

        self.task_started = Signal()
        self.task_error = Signal()
        self.task_finished = Signal()

    # ------------------------------------------------------------------
    # Introspection helpers
    # ------------------------------------------------------------------
    def is_busy(self) -> bool:
        """Return ``True`` while any tracked task is executing."""

        return bool(self._active)

    def active_names(self) -> list[str]:
        return [record.name for record in self._active.values()]

    # ------------------------------------------------------------------
    # Task submission
    # ------------------------------------------------------------------
    def submit(self, name: str, coro: Awaitable) -> Optional[asyncio.Task]:
        """Schedule *coro* on the running loop and track it under *name*."""

        if self._closed:
            self._logger.debug("Ignoring task %s submitted after shutdown", name)
            close = getattr(coro, "close", None)
            if close is not None:
                close()
            return None

        task_id = f"{name}#{next(self._counter)}"
        task = asyncio.ensure_future(coro)
        self._active[task_id] = _TaskRecord(name=name, task=task)
        task.add_done_callback(lambda t, task_id=task_id: self._on_done(task_id, t))
        self.task_started.emit(task_id)
        return task

    async def wait_idle(self) -> None:
        """Wait until every tracked task, including ones spawned meanwhile, is done."""

        while self._active:
            tasks = [record.task for record in self._active.values()]
            await asyncio.gather(*tasks, return_exceptions=True)
            # Done callbacks run on the next loop iteration.
            await asyncio.sleep(0)

    def shutdown(self) -> None:
        """Refuse new submissions; in-flight tasks run to completion."""

        self._closed = True

    def _on_done(self, task_id: str, task: asyncio.Task) -> None:
        record = self._active.pop(task_id, None)
        if record is None:
            return
        if task.cancelled():
            self._logger.debug("Task %s was cancelled", task_id)
            self.task_finished.emit(task_id)
            return
        exc = task.exception()
        if exc is not None:
            self._logger.error("Task %s failed: %s", task_id, exc, exc_info=exc)
            self.task_error.emit(task_id, exc)
            return
        self.task_finished.emit(task_id)
