"""StepScheduler backed by single-shot QTimers on the Qt event loop."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QObject, QTimer

from bathtub.core.scheduler import StepHandle, StepScheduler


class QtStepScheduler(StepScheduler):
    """Runs each scheduled step from its own single-shot QTimer.

    Timers are parented to *parent* so they die with the owning window.
    """

    def __init__(self, parent: Optional[QObject] = None) -> None:
        super().__init__()
        self._parent = parent

    def _arm(self, handle: StepHandle) -> None:
        timer = QTimer(self._parent)
        timer.setSingleShot(True)
        timer.setInterval(max(0, int(round(handle.delay * 1000))))
        timer.timeout.connect(lambda: self._on_timeout(handle))
        handle.timer = timer
        timer.start()

    def _disarm(self, handle: StepHandle) -> None:
        timer = handle.timer
        if timer is None:
            return
        timer.stop()
        timer.deleteLater()
        handle.timer = None

    def _on_timeout(self, handle: StepHandle) -> None:
        timer = handle.timer
        handle.timer = None
        if timer is not None:
            timer.deleteLater()
        self._fire(handle)
