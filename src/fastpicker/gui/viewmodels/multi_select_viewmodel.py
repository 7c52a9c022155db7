"""Pure Python MultiSelectViewModel: no Qt dependency."""

from __future__ import annotations

import logging
from typing import Optional

from fastpicker.application.interfaces import ITransitionDriver
from fastpicker.config import TRANSITION_DURATION_MS, TRANSITION_REVERSE_DURATION_MS
from fastpicker.gui.viewmodels.base import BaseViewModel
from fastpicker.gui.viewmodels.selection_viewmodel import SelectionViewModel
from fastpicker.gui.viewmodels.transition import Transition, TransitionState


class MultiSelectViewModel(BaseViewModel):
    """Multi-select mode backed by an animated transition.

    Leaving the mode clears the selection only once the exit transition has
    completed, so the selection count stays visible while the toolbar
    animates away.
    """

    def __init__(
        self,
        selection: SelectionViewModel,
        *,
        initially_active: bool = False,
        driver: Optional[ITransitionDriver] = None,
        duration_ms: int = TRANSITION_DURATION_MS,
        reverse_duration_ms: int = TRANSITION_REVERSE_DURATION_MS,
    ) -> None:
        super().__init__()
        self._selection = selection
        self._logger = logging.getLogger(__name__)
        self.transition = Transition(
            duration_ms=duration_ms,
            reverse_duration_ms=reverse_duration_ms,
            driver=driver,
            initially_active=initially_active,
            name="multi-select",
        )
        self.connect_signal(self.transition.completed, self._on_transition_completed)

    @property
    def state(self) -> TransitionState:
        return self.transition.state.value

    @property
    def is_active(self) -> bool:
        """``True`` while the mode is entered or being entered."""
        return self.transition.is_forward

    def activate(self) -> None:
        self.transition.forward()

    def deactivate(self) -> None:
        self.transition.reverse()

    def toggle(self) -> None:
        self.transition.toggle()

    def dispose(self) -> None:
        super().dispose()
        self.transition.stop()

    def _on_transition_completed(self, state: TransitionState) -> None:
        if state is TransitionState.INACTIVE:
            self._logger.debug("Multi-select closed; clearing %d items", self._selection.count)
            self._selection.clear()
