from __future__ import annotations

import logging
from typing import Callable, Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QComboBox,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from bathtub.core.controller import DirectionController
from bathtub.core.counter import Direction
from bathtub.core.presets import TubPresets
from bathtub.ui.colors import TubColors
from bathtub.ui.models import TubViewState
from bathtub.ui.tub_widget import BathtubWidget

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Bathtub window: fill/drain buttons, target and delay pickers, the tub and an info line.

    The window only feeds requests into the controller and re-reads its state
    whenever the controller reports a change.
    """

    def __init__(self, controller: DirectionController, presets: TubPresets) -> None:
        super().__init__()
        self._controller = controller
        self._presets = presets

        self._increase_button: Optional[QPushButton] = None
        self._decrease_button: Optional[QPushButton] = None
        self._target_combo: Optional[QComboBox] = None
        self._delay_combo: Optional[QComboBox] = None
        self._tub: Optional[BathtubWidget] = None
        self._direction_label: Optional[QLabel] = None
        self._level_label: Optional[QLabel] = None

        self.setWindowTitle("Bathtub")
        self._build_ui()
        self._unsubscribe: Callable[[], None] = self._controller.subscribe(self._refresh)
        self._refresh()

    def _build_ui(self) -> None:
        root = QWidget()
        root.setObjectName("bathtubRoot")
        root.setStyleSheet(
            f"""
            QWidget#bathtubRoot {{
                background: qlineargradient(x1:0, y1:0, x2:0, y2:1,
                    stop:0 {TubColors.BG_TOP}, stop:1 {TubColors.BG_BOTTOM});
            }}
            QPushButton {{
                background: {TubColors.PRIMARY};
                color: white;
                border: none;
                border-radius: 10px;
                padding: 10px 16px;
                font-weight: 700;
            }}
            QPushButton:hover {{
                background: {TubColors.PRIMARY_LIGHT};
            }}
            QPushButton:pressed {{
                background: {TubColors.PRIMARY_DARK};
            }}
            QLabel {{
                color: {TubColors.TEXT_PRIMARY};
            }}
            QLabel#pickerCaption {{
                color: {TubColors.TEXT_MUTED};
                font-size: 11px;
                font-weight: 700;
            }}
            """
        )

        controls = QHBoxLayout()
        controls.setSpacing(16)

        self._increase_button = QPushButton("Increase Water Level")
        self._increase_button.clicked.connect(lambda: self._controller.request_direction(Direction.INCREASING))

        self._decrease_button = QPushButton("Decrease Water Level")
        self._decrease_button.clicked.connect(lambda: self._controller.request_direction(Direction.DECREASING))

        self._target_combo = QComboBox()
        for preset in self._presets.targets:
            self._target_combo.addItem(preset.label, int(preset.value))
        self._select_data(self._target_combo, self._controller.target)
        self._target_combo.currentIndexChanged.connect(self._on_target_changed)

        self._delay_combo = QComboBox()
        for preset in self._presets.delays:
            self._delay_combo.addItem(preset.label, float(preset.value))
        self._select_data(self._delay_combo, self._controller.delay)
        self._delay_combo.currentIndexChanged.connect(self._on_delay_changed)

        pickers = QVBoxLayout()
        pickers.setSpacing(6)
        for caption, combo in (("Waterlevel", self._target_combo), ("Delay", self._delay_combo)):
            label = QLabel(caption)
            label.setObjectName("pickerCaption")
            pickers.addWidget(label)
            pickers.addWidget(combo)

        controls.addWidget(self._increase_button, 0, Qt.AlignVCenter)
        controls.addLayout(pickers, 1)
        controls.addWidget(self._decrease_button, 0, Qt.AlignVCenter)

        self._tub = BathtubWidget()

        info = QHBoxLayout()
        self._direction_label = QLabel("")
        self._level_label = QLabel("")
        info.addWidget(self._direction_label, 0, Qt.AlignLeft)
        info.addStretch(1)
        info.addWidget(self._level_label, 0, Qt.AlignRight)

        layout = QVBoxLayout(root)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(16)
        layout.addLayout(controls)
        layout.addWidget(self._tub, 1)
        layout.addLayout(info)

        self.setCentralWidget(root)
        self.resize(520, 560)

    @staticmethod
    def _select_data(combo: QComboBox, value: float) -> None:
        for i in range(combo.count()):
            if combo.itemData(i) == value:
                combo.setCurrentIndex(i)
                return

    def _on_target_changed(self, index: int) -> None:
        value = self._target_combo.itemData(index)
        if value is None:
            return
        self._controller.set_target(int(value))
        self._refresh()

    def _on_delay_changed(self, index: int) -> None:
        value = self._delay_combo.itemData(index)
        if value is None:
            return
        self._controller.set_delay(float(value))

    def _refresh(self) -> None:
        """Re-read the controller and push the snapshot into the tub and info line."""
        state = TubViewState.from_controller(self._controller)
        self._tub.set_state(state)
        self._direction_label.setText(state.direction_text)
        self._level_label.setText(state.level_text)

    def closeEvent(self, event: QCloseEvent) -> None:
        self._controller.stop()
        self._unsubscribe()
        logger.info("Window closed at level %d", self._controller.current_level())
        super().closeEvent(event)
