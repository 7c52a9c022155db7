"""Drive picker transitions with ``QVariantAnimation``."""

from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtCore import QEasingCurve, QObject, QVariantAnimation

from fastpicker.application.interfaces import ITransitionDriver, ITransitionHandle


class _AnimationHandle(ITransitionHandle):
    def __init__(self, animation: QVariantAnimation) -> None:
        self._animation: Optional[QVariantAnimation] = animation

    def cancel(self) -> None:
        animation = self._animation
        if animation is None:
            return
        self._animation = None
        # Disconnect first so ``stop()`` does not report a finished phase.
        _quietly(lambda: animation.finished.disconnect())
        _quietly(lambda: animation.valueChanged.disconnect())
        _quietly(animation.stop)
        _quietly(animation.deleteLater)


def _quietly(call: Callable[[], object]) -> None:
    try:
        call()
    except (RuntimeError, TypeError):
        # Already deleted by Qt, or nothing left connected.
        pass


class QtTransitionDriver(ITransitionDriver):
    """Animate each transition phase on the Qt event loop.

    Values are forwarded to the transition's ``progress`` so Qt/QML views can
    bind opacity or offsets to it; the phase completes when the animation
    emits ``finished``.
    """

    def __init__(
        self,
        parent: Optional[QObject] = None,
        easing: QEasingCurve.Type = QEasingCurve.Type.InOutQuad,
    ) -> None:
        self._parent = parent
        self._easing = easing

    def schedule(
        self,
        duration_ms: int,
        start: float,
        end: float,
        on_progress: Callable[[float], None],
        on_finished: Callable[[], None],
    ) -> ITransitionHandle:
        animation = QVariantAnimation(self._parent)
        animation.setStartValue(float(start))
        animation.setEndValue(float(end))
        animation.setDuration(int(duration_ms))
        animation.setEasingCurve(self._easing)

        def _on_value_changed(value: float) -> None:
            on_progress(float(value))

        def _on_finished() -> None:
            on_finished()
            animation.deleteLater()

        animation.valueChanged.connect(_on_value_changed)
        animation.finished.connect(_on_finished)
        animation.start()
        return _AnimationHandle(animation)
