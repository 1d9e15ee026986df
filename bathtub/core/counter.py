from __future__ import annotations

from enum import Enum
from typing import Optional


class Direction(str, Enum):
    INCREASING = "up"
    DECREASING = "down"


def direction_label(direction: Optional[Direction]) -> str:
    """Short label for the info line; idle shows as ``--``."""
    if direction is None:
        return "--"
    return direction.value


class LevelCounter:
    """Current water level, bounded to ``[0, max_capacity]``, plus the target level."""

    def __init__(self, max_capacity: int, target: int = 0, current: int = 0) -> None:
        if max_capacity <= 0:
            raise ValueError(f"max_capacity must be positive, got {max_capacity}")
        self._max_capacity = int(max_capacity)
        self._current = self._clamp(current)
        self._target = self._clamp(target)

    @property
    def max_capacity(self) -> int:
        return self._max_capacity

    @property
    def current(self) -> int:
        return self._current

    @property
    def target(self) -> int:
        return self._target

    @target.setter
    def target(self, value: int) -> None:
        self._target = self._clamp(value)

    def step(self, direction: Direction) -> int:
        """Move one level in *direction* and return the new level.

        Stepping past a bound is a no-op rather than an error.
        """
        delta = 1 if direction is Direction.INCREASING else -1
        self._current = self._clamp(self._current + delta)
        return self._current

    def _clamp(self, value: int) -> int:
        return max(0, min(int(value), self._max_capacity))
