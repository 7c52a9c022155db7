"""Forward/reverse transition state machine shared by picker UI modes.

A :class:`Transition` models an animated two-position switch such as the
multi-select mode, the album panel or a permission banner.  Entering and
leaving are explicit phases; side effects that must wait for the end of a
phase connect to :attr:`Transition.completed` instead of being called
directly, which keeps them deterministic and independent of real time.

Phase completion is delegated to an :class:`ITransitionDriver`.  Without a
driver the transition is *manual*: a phase stays in flight until
:meth:`Transition.finish` is called.  Zero-length phases always complete
synchronously.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from fastpicker.application.interfaces import ITransitionDriver, ITransitionHandle
from fastpicker.gui.viewmodels.signal import ObservableProperty, Signal

_logger = logging.getLogger(__name__)


class TransitionState(str, Enum):
    INACTIVE = "inactive"
    ACTIVATING = "activating"
    ACTIVE = "active"
    DEACTIVATING = "deactivating"


class Transition:
    """Two-position transition with an observable state and progress."""

    def __init__(
        self,
        *,
        duration_ms: int,
        reverse_duration_ms: Optional[int] = None,
        driver: Optional[ITransitionDriver] = None,
        initially_active: bool = False,
        name: str = "",
    ) -> None:
        self.name = name
        self._duration_ms = max(0, int(duration_ms))
        self._reverse_duration_ms = max(
            0, int(duration_ms if reverse_duration_ms is None else reverse_duration_ms)
        )
        self._driver = driver
        self._handle: Optional[ITransitionHandle] = None
        self._phase = 0

        self.state = ObservableProperty(
            TransitionState.ACTIVE if initially_active else TransitionState.INACTIVE
        )
        self.progress = ObservableProperty(1.0 if initially_active else 0.0)
        # Emits the settled state (ACTIVE or INACTIVE) when a phase finishes.
        self.completed = Signal()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def is_visible(self) -> bool:
        """``True`` whenever the transition is not fully dismissed."""

        return self.state.value is not TransitionState.INACTIVE

    @property
    def is_forward(self) -> bool:
        return self.state.value in (TransitionState.ACTIVATING, TransitionState.ACTIVE)

    @property
    def is_animating(self) -> bool:
        return self.state.value in (TransitionState.ACTIVATING, TransitionState.DEACTIVATING)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def forward(self) -> None:
        if self.is_forward:
            return
        self._begin(TransitionState.ACTIVATING, self._duration_ms, 1.0)

    def reverse(self) -> None:
        if not self.is_forward:
            return
        self._begin(TransitionState.DEACTIVATING, self._reverse_duration_ms, 0.0)

    def toggle(self) -> None:
        if self.is_forward:
            self.reverse()
        else:
            self.forward()

    def finish(self) -> None:
        """Complete the in-flight phase immediately."""

        if self.is_animating:
            self._complete(self._phase)

    def stop(self) -> None:
        """Cancel any scheduled completion, leaving the state where it is."""

        self._phase += 1
        self._cancel_handle()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _begin(self, state: TransitionState, duration_ms: int, target: float) -> None:
        self._cancel_handle()
        self._phase += 1
        phase = self._phase
        self.state.value = state
        if duration_ms == 0:
            self._complete(phase)
            return
        if self._driver is None:
            return
        self._handle = self._driver.schedule(
            duration_ms,
            self.progress.value,
            target,
            self._on_progress,
            lambda: self._complete(phase),
        )

    def _on_progress(self, value: float) -> None:
        self.progress.value = float(value)

    def _complete(self, phase: int) -> None:
        if phase != self._phase:
            _logger.debug("Ignoring stale completion for transition %s", self.name)
            return
        self._handle = None
        if self.state.value is TransitionState.ACTIVATING:
            settled = TransitionState.ACTIVE
            self.progress.value = 1.0
        elif self.state.value is TransitionState.DEACTIVATING:
            settled = TransitionState.INACTIVE
            self.progress.value = 0.0
        else:
            return
        self.state.value = settled
        self.completed.emit(settled)

    def _cancel_handle(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def __repr__(self) -> str:
        return f"Transition({self.name!r}, {self.state.value.value})"
