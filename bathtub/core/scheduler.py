from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, Optional


class HandleState(str, Enum):
    PENDING = "pending"
    FIRED = "fired"
    CANCELLED = "cancelled"


@dataclass(eq=False)
class StepHandle:
    """A single scheduled step. Live while ``state`` is PENDING."""

    callback: Callable[[], None]
    delay: float
    due: float = 0.0
    seq: int = 0
    state: HandleState = HandleState.PENDING
    timer: Any = field(default=None, repr=False)

    @property
    def live(self) -> bool:
        return self.state is HandleState.PENDING


class StepScheduler:
    """Arranges one future callback per :meth:`schedule` call.

    Subclasses implement ``_arm`` and ``_disarm`` for their timer source.
    :meth:`cancel` is safe to call with a fired, cancelled or ``None`` handle.
    """

    def __init__(self) -> None:
        self._seq = itertools.count()

    def schedule(self, callback: Callable[[], None], delay: float) -> StepHandle:
        handle = StepHandle(callback=callback, delay=float(delay), seq=next(self._seq))
        self._arm(handle)
        return handle

    def cancel(self, handle: Optional[StepHandle]) -> None:
        if handle is None or not handle.live:
            return
        handle.state = HandleState.CANCELLED
        self._disarm(handle)

    def _fire(self, handle: StepHandle) -> None:
        if not handle.live:
            return
        handle.state = HandleState.FIRED
        handle.callback()

    def _arm(self, handle: StepHandle) -> None:
        raise NotImplementedError

    def _disarm(self, handle: StepHandle) -> None:
        raise NotImplementedError


class ManualStepScheduler(StepScheduler):
    """Virtual-clock scheduler: nothing fires until :meth:`advance` is called.

    Used for headless runs and tests where wall-clock timers are unwanted.
    """

    def __init__(self, start: float = 0.0) -> None:
        super().__init__()
        self._now = float(start)
        self._handles: List[StepHandle] = []

    @property
    def now(self) -> float:
        return self._now

    def pending(self) -> List[StepHandle]:
        """Live handles ordered by due time."""
        return sorted((h for h in self._handles if h.live), key=lambda h: (h.due, h.seq))

    def advance(self, seconds: float) -> int:
        """Move the clock forward, firing every handle that comes due. Returns the firing count."""
        if seconds < 0:
            raise ValueError(f"cannot advance by a negative duration: {seconds}")
        horizon = self._now + seconds
        fired = 0
        while True:
            upcoming = self.pending()
            if not upcoming or upcoming[0].due > horizon:
                break
            handle = upcoming[0]
            # Callbacks that schedule again measure from the firing time.
            self._now = handle.due
            self._fire(handle)
            fired += 1
        self._now = horizon
        self._handles = [h for h in self._handles if h.live]
        return fired

    def run_until_idle(self, limit: int = 10_000) -> int:
        """Fire pending handles, jumping the clock, until none remain."""
        fired = 0
        while True:
            upcoming = self.pending()
            if not upcoming:
                break
            if fired >= limit:
                raise RuntimeError(f"scheduler still busy after {limit} firings")
            handle = upcoming[0]
            self._now = max(self._now, handle.due)
            self._fire(handle)
            fired += 1
        self._handles = [h for h in self._handles if h.live]
        return fired

    def _arm(self, handle: StepHandle) -> None:
        handle.due = self._now + handle.delay
        self._handles.append(handle)

    def _disarm(self, handle: StepHandle) -> None:
        self._handles = [h for h in self._handles if h is not handle]
