from unittest.mock import MagicMock

import pytest

pytest.importorskip("PySide6.QtCore", reason="PySide6 is required for Qt driver tests", exc_type=ImportError)

from fastpicker.gui.services.qt_transition_driver import QtTransitionDriver, _AnimationHandle
from fastpicker.gui.viewmodels.transition import Transition, TransitionState


def test_animation_completes_forward_phase(qtbot):
    transition = Transition(duration_ms=40, reverse_duration_ms=30, driver=QtTransitionDriver())
    values = []
    transition.progress.changed.connect(lambda new, old: values.append(new))

    transition.forward()
    assert transition.state.value is TransitionState.ACTIVATING

    qtbot.waitUntil(lambda: transition.state.value is TransitionState.ACTIVE, timeout=2000)
    assert transition.progress.value == 1.0
    assert values and all(0.0 <= v <= 1.0 for v in values)


def test_reversing_mid_animation_cancels_forward_phase(qtbot):
    transition = Transition(duration_ms=200, reverse_duration_ms=30, driver=QtTransitionDriver())
    completed = []
    transition.completed.connect(completed.append)

    transition.forward()
    transition.reverse()

    qtbot.waitUntil(lambda: transition.state.value is TransitionState.INACTIVE, timeout=2000)
    qtbot.wait(250)
    assert completed == [TransitionState.INACTIVE]


def test_cancel_still_stops_when_disconnect_fails():
    animation = MagicMock()
    animation.finished.disconnect.side_effect = RuntimeError("Signal source has been deleted")
    handle = _AnimationHandle(animation)

    handle.cancel()
    handle.cancel()

    animation.valueChanged.disconnect.assert_called_once()
    animation.stop.assert_called_once()
    animation.deleteLater.assert_called_once()
