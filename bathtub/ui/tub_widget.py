"""The tub itself: a rounded shell with one painted slab per water level."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QRectF, Qt
from PySide6.QtGui import QColor, QPainter, QPen
from PySide6.QtWidgets import QWidget

from bathtub.ui.colors import TubColors, water_shade
from bathtub.ui.models import TubViewState


class BathtubWidget(QWidget):
    """Stacks water segments from the floor up; a dashed line marks the target."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._state: Optional[TubViewState] = None
        self.setMinimumSize(260, 220)

    def set_state(self, state: TubViewState) -> None:
        self._state = state
        self.setToolTip(f"{state.level_text} / {state.max_capacity}")
        self.update()

    def paintEvent(self, event) -> None:
        """Paint the shell, the water segments and the target marker."""
        super().paintEvent(event)
        state = self._state
        if state is None:
            return
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)

        margin = 12
        shell = QRectF(margin, margin, self.width() - 2 * margin, self.height() - 2 * margin)
        radius = max(8.0, shell.width() * 0.06)
        painter.setBrush(QColor(TubColors.TUB_FILL))
        painter.setPen(QPen(QColor(TubColors.TUB_BORDER), 3))
        painter.drawRoundedRect(shell, radius, radius)

        capacity = max(1, state.max_capacity)
        inner = shell.adjusted(6, 6, -6, -6)
        slab_h = inner.height() / capacity
        gap = 1.0 if slab_h > 6 else 0.0

        painter.setPen(Qt.NoPen)
        for segment in state.segments:
            top = inner.bottom() - (segment.index + 1) * slab_h
            rect = QRectF(inner.left(), top + gap, inner.width(), slab_h - gap)
            painter.setBrush(QColor(water_shade(segment.index, capacity)))
            painter.drawRoundedRect(rect, 4, 4)

        if 0 < state.target <= capacity:
            y = inner.bottom() - state.target * slab_h
            pen = QPen(QColor(TubColors.PRIMARY_DARK), 2, Qt.DashLine)
            painter.setPen(pen)
            painter.drawLine(int(inner.left()), int(y), int(inner.right()), int(y))
        painter.end()
