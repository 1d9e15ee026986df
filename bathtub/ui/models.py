"""Data models used by the UI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from bathtub.core.controller import DirectionController
from bathtub.core.counter import Direction, direction_label
from bathtub.core.projection import Segment


@dataclass
class TubViewState:
    """Snapshot of what the tub view shows: level, direction and painted segments."""

    level: int
    max_capacity: int
    target: int
    direction: Optional[Direction]
    segments: List[Segment]

    @property
    def direction_text(self) -> str:
        return f"Direction: {direction_label(self.direction)}"

    @property
    def level_text(self) -> str:
        return f"Level: {self.level}"

    @classmethod
    def from_controller(cls, controller: DirectionController) -> "TubViewState":
        return cls(
            level=controller.current_level(),
            max_capacity=controller.max_capacity,
            target=controller.target,
            direction=controller.current_direction(),
            segments=controller.rendered_segments(),
        )
