from __future__ import annotations

import logging
from typing import Callable, List, Optional

from bathtub.core.counter import Direction, LevelCounter
from bathtub.core.projection import Segment, project
from bathtub.core.scheduler import StepHandle, StepScheduler

logger = logging.getLogger(__name__)

DEFAULT_DELAY = 0.1


class DirectionController:
    """Drives the water level toward the target one step per ``delay`` seconds.

    The controller is idle while ``direction`` is ``None``. A direction request
    takes one step right away and schedules the next; each firing checks the
    stop conditions before stepping again:

      * **up** stops once the level reaches the target.
      * **down** stops at an empty tub, or lands on the target when draining
        from above it (the step from ``target + 1`` is the last one).

    Requesting the opposite direction mid-animation cancels the pending step
    and restarts from the current level.
    """

    def __init__(
        self,
        counter: LevelCounter,
        scheduler: StepScheduler,
        delay: float = DEFAULT_DELAY,
    ) -> None:
        self._counter = counter
        self._scheduler = scheduler
        self._delay = self._validate_delay(delay)
        self._direction: Optional[Direction] = None
        self._pending: Optional[StepHandle] = None
        self._listeners: List[Callable[[], None]] = []

    @property
    def target(self) -> int:
        return self._counter.target

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def max_capacity(self) -> int:
        return self._counter.max_capacity

    @property
    def is_animating(self) -> bool:
        return self._pending is not None and self._pending.live

    def current_direction(self) -> Optional[Direction]:
        return self._direction

    def current_level(self) -> int:
        return self._counter.current

    def rendered_segments(self) -> List[Segment]:
        return project(self._counter.current)

    def subscribe(self, listener: Callable[[], None]) -> Callable[[], None]:
        """Call *listener* after every evaluation. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def set_target(self, value: int) -> None:
        self._counter.target = value
        logger.debug("Target set to %d", self._counter.target)

    def set_delay(self, value: float) -> None:
        """Change the step delay. An already pending step keeps its original timing."""
        self._delay = self._validate_delay(value)
        logger.debug("Delay set to %.3fs", self._delay)

    def request_direction(self, direction: Direction) -> None:
        if direction is self._direction:
            return
        if self._pending is not None:
            # The old step must never land once the direction has flipped.
            logger.debug("Switching direction at level %d -> %s", self._counter.current, direction.value)
            self._scheduler.cancel(self._pending)
            self._pending = None
        self._direction = direction
        self._evaluate()

    def stop(self) -> None:
        """Cancel any pending step and go idle without moving the level."""
        if self._direction is None and self._pending is None:
            return
        self._reset()
        self._notify()

    def _on_step_due(self, handle: Optional[StepHandle]) -> None:
        if handle is None or handle is not self._pending:
            return
        self._pending = None
        self._evaluate()

    def _evaluate(self) -> None:
        direction = self._direction
        if direction is None:
            return
        level = self._counter.current
        target = self._counter.target

        if (direction is Direction.INCREASING and level >= target) or (
            direction is Direction.DECREASING and level <= 0
        ):
            logger.debug("Stopped at level %d going %s", level, direction.value)
            self._reset()
            self._notify()
            return

        if direction is Direction.DECREASING and level - 1 == target:
            self._counter.step(direction)
            logger.debug("Drained down to target %d", self._counter.current)
            self._reset()
            self._notify()
            return

        self._counter.step(direction)
        self._schedule_next()
        self._notify()

    def _schedule_next(self) -> None:
        handle: Optional[StepHandle] = None

        def _fire() -> None:
            self._on_step_due(handle)

        handle = self._scheduler.schedule(_fire, self._delay)
        self._pending = handle

    def _reset(self) -> None:
        self._direction = None
        self._scheduler.cancel(self._pending)
        self._pending = None

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()

    @staticmethod
    def _validate_delay(value: float) -> float:
        delay = float(value)
        if delay <= 0:
            raise ValueError(f"delay must be positive, got {value}")
        return delay
