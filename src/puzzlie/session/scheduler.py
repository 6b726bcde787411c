"""Event-loop-free schedulers for deferred session continuations."""

from __future__ import annotations

from collections.abc import Callable

from puzzlie.session.interfaces import IScheduledTask, IScheduler


class CallbackTask(IScheduledTask):
    """A queued callback that runs at most once."""

    __slots__ = ("_callback", "_delay_ms", "_pending")

    def __init__(self, delay_ms: int, callback: Callable[[], None]) -> None:
        self._delay_ms = delay_ms
        self._callback = callback
        self._pending = True

    @property
    def delay_ms(self) -> int:
        return self._delay_ms

    @property
    def is_pending(self) -> bool:
        return self._pending

    def cancel(self) -> None:
        self._pending = False

    def run(self) -> bool:
        """Run the callback if still pending. Returns True if it ran."""
        if not self._pending:
            return False
        self._pending = False
        self._callback()
        return True


class ImmediateScheduler(IScheduler):
    """Runs every callback synchronously inside :meth:`schedule`.

    The delay is ignored; useful for headless use and deterministic tests.
    """

    __slots__ = ()

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> IScheduledTask:
        task = CallbackTask(delay_ms, callback)
        task.run()
        return task


class ManualScheduler(IScheduler):
    """Queues callbacks until :meth:`run_pending` is called.

    Lets tests interleave a stale continuation with a newer session.
    """

    __slots__ = ("_queue",)

    def __init__(self) -> None:
        self._queue: list[CallbackTask] = []

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> IScheduledTask:
        task = CallbackTask(delay_ms, callback)
        self._queue.append(task)
        return task

    @property
    def pending_count(self) -> int:
        return sum(1 for task in self._queue if task.is_pending)

    def run_pending(self) -> int:
        """Run queued tasks in order, cancelled ones are skipped.

        Returns the number of callbacks that actually ran.
        """
        queue, self._queue = self._queue, []
        return sum(1 for task in queue if task.run())

    def fire_all(self) -> int:
        """Run every queued callback, including cancelled ones.

        Simulates a timer backend that ignored cancellation.
        """
        queue, self._queue = self._queue, []
        for task in queue:
            task._callback()
        return len(queue)
