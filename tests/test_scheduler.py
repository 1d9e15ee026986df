"""Tests for bathtub.core.scheduler – virtual-clock step scheduling."""

from __future__ import annotations

import pytest

from bathtub.core.scheduler import HandleState, ManualStepScheduler, StepScheduler


@pytest.fixture()
def scheduler() -> ManualStepScheduler:
    return ManualStepScheduler()


# ---------------------------------------------------------------------------
# schedule / advance
# ---------------------------------------------------------------------------

class TestSchedule:
    def test_handle_is_live(self, scheduler: ManualStepScheduler):
        h = scheduler.schedule(lambda: None, 1.0)
        assert h.live
        assert h.state is HandleState.PENDING
        assert h.due == 1.0
        assert scheduler.pending() == [h]

    def test_not_fired_before_delay(self, scheduler: ManualStepScheduler):
        calls = []
        scheduler.schedule(lambda: calls.append(1), 1.0)
        assert scheduler.advance(0.5) == 0
        assert calls == []

    def test_fires_once_at_delay(self, scheduler: ManualStepScheduler):
        calls = []
        h = scheduler.schedule(lambda: calls.append(1), 1.0)
        assert scheduler.advance(1.0) == 1
        scheduler.advance(5.0)
        assert calls == [1]
        assert h.state is HandleState.FIRED
        assert scheduler.pending() == []

    def test_fires_in_due_order(self, scheduler: ManualStepScheduler):
        calls = []
        scheduler.schedule(lambda: calls.append("late"), 2.0)
        scheduler.schedule(lambda: calls.append("early"), 1.0)
        scheduler.schedule(lambda: calls.append("late-2"), 2.0)
        scheduler.advance(3.0)
        assert calls == ["early", "late", "late-2"]

    def test_clock_moves(self, scheduler: ManualStepScheduler):
        scheduler.advance(1.5)
        assert scheduler.now == 1.5

    def test_rescheduling_measured_from_firing_time(self, scheduler: ManualStepScheduler):
        times = []

        def tick():
            times.append(scheduler.now)
            if len(times) < 3:
                scheduler.schedule(tick, 1.0)

        scheduler.schedule(tick, 1.0)
        scheduler.advance(2.5)
        assert times == [1.0, 2.0]
        assert scheduler.now == 2.5
        assert scheduler.pending()[0].due == 3.0

    def test_negative_advance_rejected(self, scheduler: ManualStepScheduler):
        with pytest.raises(ValueError, match="negative"):
            scheduler.advance(-1.0)


# ---------------------------------------------------------------------------
# cancel
# ---------------------------------------------------------------------------

class TestCancel:
    def test_cancel_before_fire(self, scheduler: ManualStepScheduler):
        calls = []
        h = scheduler.schedule(lambda: calls.append(1), 1.0)
        scheduler.cancel(h)
        scheduler.advance(2.0)
        assert calls == []
        assert h.state is HandleState.CANCELLED
        assert scheduler.pending() == []

    def test_cancel_after_fire_is_noop(self, scheduler: ManualStepScheduler):
        h = scheduler.schedule(lambda: None, 1.0)
        scheduler.advance(1.0)
        scheduler.cancel(h)
        assert h.state is HandleState.FIRED

    def test_cancel_twice(self, scheduler: ManualStepScheduler):
        h = scheduler.schedule(lambda: None, 1.0)
        scheduler.cancel(h)
        scheduler.cancel(h)
        assert h.state is HandleState.CANCELLED

    def test_cancel_none(self, scheduler: ManualStepScheduler):
        scheduler.cancel(None)

    def test_cancel_from_earlier_callback(self, scheduler: ManualStepScheduler):
        calls = []
        second = scheduler.schedule(lambda: calls.append("second"), 2.0)
        scheduler.schedule(lambda: scheduler.cancel(second), 1.0)
        scheduler.advance(3.0)
        assert calls == []


# ---------------------------------------------------------------------------
# run_until_idle
# ---------------------------------------------------------------------------

class TestRunUntilIdle:
    def test_drains_chain(self, scheduler: ManualStepScheduler):
        remaining = [3]

        def tick():
            remaining[0] -= 1
            if remaining[0] > 0:
                scheduler.schedule(tick, 0.5)

        scheduler.schedule(tick, 0.5)
        assert scheduler.run_until_idle() == 3
        assert scheduler.now == 1.5

    def test_nothing_pending(self, scheduler: ManualStepScheduler):
        assert scheduler.run_until_idle() == 0

    def test_limit(self, scheduler: ManualStepScheduler):
        def forever():
            scheduler.schedule(forever, 1.0)

        scheduler.schedule(forever, 1.0)
        with pytest.raises(RuntimeError, match="still busy"):
            scheduler.run_until_idle(limit=5)


class TestBaseScheduler:
    def test_abstract_arm(self):
        with pytest.raises(NotImplementedError):
            StepScheduler().schedule(lambda: None, 1.0)
