"""Qt bridge: QTimer-backed scheduling and signal re-emission for a session."""

from __future__ import annotations

from collections.abc import Callable

from PyQt6.QtCore import QObject, QTimer, pyqtSignal, pyqtSlot

from puzzlie.core.errors import DataIntegrityError
from puzzlie.core.puzzle import Puzzle
from puzzlie.core.rules import IRulesEngine
from puzzlie.session.controller import PuzzleSession
from puzzlie.session.interfaces import (
    IScheduledTask,
    IScheduler,
    MoveVerdict,
    SessionConfig,
    SessionStatus,
)


class _QtTimerTask(IScheduledTask):
    """One single-shot QTimer wrapped as a cancellable task."""

    __slots__ = ("__weakref__", "_timer", "_callback", "_pending")

    def __init__(self, timer: QTimer, callback: Callable[[], None]) -> None:
        self._timer = timer
        self._callback = callback
        self._pending = True
        timer.timeout.connect(self._fire)

    @property
    def is_pending(self) -> bool:
        return self._pending

    def cancel(self) -> None:
        if not self._pending:
            return
        self._pending = False
        self._timer.stop()
        self._timer.deleteLater()

    def _fire(self) -> None:
        if not self._pending:
            return
        self._pending = False
        self._timer.deleteLater()
        self._callback()


class QtScheduler(IScheduler):
    """Schedules continuations on the Qt event loop of the calling thread."""

    __slots__ = ("_parent",)

    def __init__(self, parent: QObject | None = None) -> None:
        self._parent = parent

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> IScheduledTask:
        timer = QTimer(self._parent)
        timer.setSingleShot(True)
        task = _QtTimerTask(timer, callback)
        timer.start(delay_ms)
        return task


class PuzzleSessionBridge(QObject):
    """Owns a :class:`PuzzleSession` driven by the Qt event loop.

    Session callbacks are re-emitted as signals so widgets can connect to
    them with queued or direct connections.
    """

    solved = pyqtSignal(int, bool)  # incorrect_attempts, hint_used
    failed = pyqtSignal()
    status_changed = pyqtSignal(int)
    position_changed = pyqtSignal(str)
    data_error = pyqtSignal(str)

    def __init__(
        self,
        *,
        rules: IRulesEngine | None = None,
        config: SessionConfig | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._scheduler = QtScheduler(self)
        self._session = PuzzleSession(rules, self._scheduler, config)

        events = self._session.events
        events.on_solve.append(self._on_solve)
        events.on_fail.append(self.failed.emit)
        events.on_status_changed.append(self._on_status_changed)
        events.on_position_changed.append(self.position_changed.emit)
        events.on_data_error.append(self._on_data_error)

    @property
    def session(self) -> PuzzleSession:
        return self._session

    @pyqtSlot(object)
    def start(self, puzzle: object) -> None:
        """Start *puzzle*; anything that is not a Puzzle is reported as a data error."""
        if not isinstance(puzzle, Puzzle):
            self.data_error.emit("Bridge received an invalid puzzle")
            return
        self._session.start(puzzle)

    def submit_move(self, from_square: str, to_square: str) -> MoveVerdict:
        return self._session.submit_move(from_square, to_square)

    @pyqtSlot()
    def reset(self) -> None:
        self._session.reset()

    def request_hint(self) -> str | None:
        return self._session.request_hint()

    @pyqtSlot()
    def discard(self) -> None:
        self._session.discard()

    # ── Session callbacks ────────────────────────────────────────────────

    def _on_solve(self, incorrect_attempts: int, hint_used: bool) -> None:
        self.solved.emit(incorrect_attempts, hint_used)

    def _on_status_changed(self, status: SessionStatus) -> None:
        self.status_changed.emit(int(status))

    def _on_data_error(self, error: DataIntegrityError) -> None:
        self.data_error.emit(str(error))
