"""Tests for the event-loop-free schedulers."""

from puzzlie.session.scheduler import CallbackTask, ImmediateScheduler, ManualScheduler


class TestCallbackTask:
    def test_runs_once(self) -> None:
        calls: list[int] = []
        task = CallbackTask(0, lambda: calls.append(1))
        assert task.run() is True
        assert task.run() is False
        assert calls == [1]
        assert not task.is_pending

    def test_cancelled_task_does_not_run(self) -> None:
        calls: list[int] = []
        task = CallbackTask(0, lambda: calls.append(1))
        task.cancel()
        task.cancel()  # idempotent
        assert task.run() is False
        assert calls == []


class TestImmediateScheduler:
    def test_runs_synchronously(self) -> None:
        calls: list[int] = []
        task = ImmediateScheduler().schedule(1000, lambda: calls.append(1))
        assert calls == [1]
        assert not task.is_pending


class TestManualScheduler:
    def test_defers_until_run_pending(self) -> None:
        sched = ManualScheduler()
        calls: list[str] = []
        sched.schedule(10, lambda: calls.append("a"))
        sched.schedule(10, lambda: calls.append("b"))
        assert calls == []
        assert sched.pending_count == 2
        assert sched.run_pending() == 2
        assert calls == ["a", "b"]
        assert sched.pending_count == 0

    def test_skips_cancelled(self) -> None:
        sched = ManualScheduler()
        calls: list[str] = []
        task = sched.schedule(10, lambda: calls.append("a"))
        sched.schedule(10, lambda: calls.append("b"))
        task.cancel()
        assert sched.run_pending() == 1
        assert calls == ["b"]

    def test_fire_all_ignores_cancellation(self) -> None:
        sched = ManualScheduler()
        calls: list[str] = []
        task = sched.schedule(10, lambda: calls.append("a"))
        task.cancel()
        assert sched.fire_all() == 1
        assert calls == ["a"]
