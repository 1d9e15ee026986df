"""Application entry point and setup for the Bathtub widget."""

import logging
import os
import sys

from PySide6.QtWidgets import QApplication

from bathtub.core.controller import DirectionController
from bathtub.core.counter import LevelCounter
from bathtub.core.presets import PresetRepository
from bathtub.ui.main_window import MainWindow
from bathtub.ui.qt_scheduler import QtStepScheduler


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    level = logging.DEBUG if os.environ.get("BATHTUB_DEBUG") == "1" else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def run() -> None:
    """Load presets, wire the controller to a Qt timer source and show the window."""
    configure_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("Bathtub")
    app.setApplicationDisplayName("Bathtub")

    presets = PresetRepository().get()
    counter = LevelCounter(max_capacity=presets.max_capacity, target=presets.default_target)
    scheduler = QtStepScheduler(parent=app)
    controller = DirectionController(counter, scheduler, delay=presets.default_delay)

    window = MainWindow(controller=controller, presets=presets)
    window.show()

    logging.info(
        "Tub ready: capacity %d, target %d, delay %.2fs",
        presets.max_capacity,
        presets.default_target,
        presets.default_delay,
    )
    sys.exit(app.exec())


if __name__ == "__main__":
    run()
