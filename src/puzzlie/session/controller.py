"""PuzzleSession — the puzzle-solving state machine.

Coordinates: MoveValidator, SequencePlayer, HintProvider, AttemptTracker.
Emits events via simple callbacks so a UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from puzzlie.core.errors import DataIntegrityError, PuzzleFormatError, RulesError
from puzzlie.core.move import PuzzleMove
from puzzlie.core.puzzle import Puzzle
from puzzlie.core.rules import ChessRules, IRulesEngine
from puzzlie.session.attempts import AttemptSummary, AttemptTracker
from puzzlie.session.hints import HintProvider
from puzzlie.session.interfaces import (
    IPuzzleSession,
    IScheduledTask,
    IScheduler,
    MoveVerdict,
    SessionConfig,
    SessionStatus,
)
from puzzlie.session.scheduler import ImmediateScheduler
from puzzlie.session.sequence import SequencePlayer
from puzzlie.session.validator import MoveValidator

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

SolveCallback = Callable[[int, bool], None]  # incorrect_attempts, hint_used
FailCallback = Callable[[], None]
StatusCallback = Callable[[SessionStatus], None]
PositionCallback = Callable[[str], None]  # fen
DataErrorCallback = Callable[[DataIntegrityError], None]


@dataclass
class SessionEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_solve: list[SolveCallback] = field(default_factory=list)
    on_fail: list[FailCallback] = field(default_factory=list)
    on_status_changed: list[StatusCallback] = field(default_factory=list)
    on_position_changed: list[PositionCallback] = field(default_factory=list)
    on_data_error: list[DataErrorCallback] = field(default_factory=list)


# ── Session ──────────────────────────────────────────────────────────────────


class PuzzleSession(IPuzzleSession):
    """Drives one puzzle at a time: plays the opening move, checks the
    player's moves against the solution, answers with scripted replies and
    reports the outcome.

    Thread-safety: every method, including scheduled continuations, must be
    called from the same thread (the scheduler's owner).

    Each start/reset bumps a generation number; the deferred opening move
    of an older generation is cancelled and, should it fire anyway, ignored.
    """

    __slots__ = (
        "_rules",
        "_scheduler",
        "_config",
        "_sequence",
        "_tracker",
        "_puzzle",
        "_status",
        "_position",
        "_post_opening_position",
        "_cursor",
        "_generation",
        "_pending_task",
        "_solve_reported",
        "_opening_move_made",
        "_hint_square",
        "_last_verdict",
        "_unreachable",
        "events",
    )

    def __init__(
        self,
        rules: IRulesEngine | None = None,
        scheduler: IScheduler | None = None,
        config: SessionConfig | None = None,
    ) -> None:
        self._rules = rules or ChessRules()
        self._scheduler = scheduler or ImmediateScheduler()
        self._config = config or SessionConfig.paced()
        self._sequence = SequencePlayer(self._rules)
        self._tracker = AttemptTracker()
        self._puzzle: Puzzle | None = None
        self._status = SessionStatus.INITIAL
        self._position: str | None = None
        self._post_opening_position: str | None = None
        self._cursor = 0
        self._generation = 0
        self._pending_task: IScheduledTask | None = None
        self._solve_reported = False
        self._opening_move_made = False
        self._hint_square: str | None = None
        self._last_verdict: MoveVerdict | None = None
        self._unreachable = False
        self.events = SessionEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def puzzle(self) -> Puzzle | None:
        return self._puzzle

    @property
    def status(self) -> SessionStatus:
        return self._status

    @property
    def position(self) -> str | None:
        """Current FEN, None before the first start."""
        return self._position

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def config(self) -> SessionConfig:
        return self._config

    @property
    def incorrect_attempts(self) -> int:
        return self._tracker.incorrect_attempts

    @property
    def hint_used(self) -> bool:
        return self._tracker.hint_used

    @property
    def hint_square(self) -> str | None:
        """Square currently highlighted as a hint, cleared after a correct move."""
        return self._hint_square

    @property
    def last_verdict(self) -> MoveVerdict | None:
        """Feedback for the last legal submission (correct/incorrect/solved)."""
        return self._last_verdict

    @property
    def opening_move_made(self) -> bool:
        return self._opening_move_made

    @property
    def is_unreachable(self) -> bool:
        """True once a scripted move failed or the solution is empty."""
        return self._unreachable

    @property
    def is_solved(self) -> bool:
        return self._status == SessionStatus.SOLVED

    def summary(self) -> AttemptSummary | None:
        """Attempt signals for the spaced-repetition scheduler."""
        if self._puzzle is None:
            return None
        return self._tracker.summary(self._puzzle.id, solved=self.is_solved)

    # ── IPuzzleSession impl ──────────────────────────────────────────────

    def start(self, puzzle: Puzzle) -> None:
        self._cancel_pending()
        self._generation += 1
        generation = self._generation

        self._puzzle = puzzle
        self._position = puzzle.start_fen
        self._post_opening_position = puzzle.start_fen
        self._cursor = 0
        self._tracker.reset()
        self._solve_reported = False
        self._opening_move_made = False
        self._hint_square = None
        self._last_verdict = None
        self._unreachable = False
        _LOGGER.info(
            "Starting puzzle %s (%d moves to find)", puzzle.id, puzzle.user_move_count
        )

        self._emit_position()
        self._set_status(SessionStatus.OPPONENT_INTRO_MOVE)
        if generation != self._generation:
            return
        self._pending_task = self._scheduler.schedule(
            self._config.opening_move_delay_ms,
            lambda: self._play_opening_move(generation),
        )

    def submit_move(self, from_square: str, to_square: str) -> MoveVerdict:
        if (
            self._puzzle is None
            or self._status != SessionStatus.AWAITING_USER_MOVE
            or self._unreachable
        ):
            return MoveVerdict.REJECTED
        assert self._position is not None

        try:
            submitted = PuzzleMove.of(from_square, to_square)
        except PuzzleFormatError:
            return MoveVerdict.ILLEGAL
        if not self._rules.is_legal(self._position, submitted):
            return MoveVerdict.ILLEGAL

        generation = self._generation
        expected = self._puzzle.solution[self._cursor]
        self._set_status(SessionStatus.RESOLVING)
        if generation != self._generation:
            return MoveVerdict.REJECTED

        if MoveValidator.matches_move(submitted, expected):
            return self._resolve_correct(self._puzzle, submitted)
        return self._resolve_incorrect(generation)

    def reset(self) -> None:
        if self._puzzle is None:
            return
        self.start(self._puzzle)

    def request_hint(self) -> str | None:
        self._tracker.record_hint()
        if self._puzzle is None:
            return None
        square = HintProvider.origin_of(self._puzzle.solution, self._cursor)
        self._hint_square = square
        return square

    def discard(self) -> None:
        """Drop the current puzzle and cancel any pending continuation."""
        self._cancel_pending()
        self._generation += 1
        self._puzzle = None
        self._position = None
        self._post_opening_position = None
        self._cursor = 0
        self._tracker.reset()
        self._hint_square = None
        self._last_verdict = None
        self._unreachable = False
        self._opening_move_made = False
        self._set_status(SessionStatus.INITIAL)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _play_opening_move(self, generation: int) -> None:
        if generation != self._generation or self._puzzle is None:
            _LOGGER.debug(
                "Ignoring stale opening move (generation %d, current %d)",
                generation,
                self._generation,
            )
            return
        if self._status != SessionStatus.OPPONENT_INTRO_MOVE:
            return
        self._pending_task = None

        puzzle = self._puzzle
        result = self._sequence.play(
            puzzle.id, puzzle.start_fen, puzzle.opening_move, None
        )
        if result.error is not None:
            # Let the player try anyway from the starting position.
            self._report_data_error(result.error)
            if generation != self._generation:
                return
        else:
            self._opening_move_made = True

        position = result.position
        self._position = position
        self._post_opening_position = position
        self._emit_position()
        if not puzzle.solution:
            # Nothing for the player to find; moves are rejected from here on.
            self._unreachable = True
            self._report_data_error(
                DataIntegrityError(puzzle.id, 0, "solution is empty")
            )
            if generation != self._generation:
                return
        self._set_status(SessionStatus.AWAITING_USER_MOVE)

    def _resolve_correct(self, puzzle: Puzzle, submitted: PuzzleMove) -> MoveVerdict:
        assert self._position is not None
        try:
            position = self._rules.apply(self._position, submitted)
        except RulesError:
            _LOGGER.warning("Rules engine refused a legal move: %s", submitted)
            self._set_status(SessionStatus.AWAITING_USER_MOVE)
            return MoveVerdict.ILLEGAL

        self._position = position
        self._hint_square = None

        if self._cursor + 2 >= len(puzzle.solution):
            self._emit_position()
            return self._mark_solved(puzzle)

        self._last_verdict = MoveVerdict.CORRECT
        reply_index = self._cursor + 1
        result = self._sequence.play(
            puzzle.id, position, puzzle.solution[reply_index], reply_index
        )
        if result.error is not None:
            # Degraded: keep the last valid board, stay in RESOLVING.
            self._unreachable = True
            self._emit_position()
            self._report_data_error(result.error)
            return MoveVerdict.CORRECT

        self._position = result.position
        self._cursor += 2
        self._emit_position()
        self._set_status(SessionStatus.AWAITING_USER_MOVE)
        return MoveVerdict.CORRECT

    def _resolve_incorrect(self, generation: int) -> MoveVerdict:
        attempts = self._tracker.record_incorrect()
        self._last_verdict = MoveVerdict.INCORRECT
        _LOGGER.debug(
            "Wrong move in puzzle %s (attempt %d)",
            self._puzzle.id if self._puzzle else "?",
            attempts,
        )
        for cb in self.events.on_fail:
            cb()
        if generation != self._generation:
            return MoveVerdict.INCORRECT

        self._position = self._post_opening_position
        self._emit_position()
        self._set_status(SessionStatus.AWAITING_USER_MOVE)
        return MoveVerdict.INCORRECT

    def _mark_solved(self, puzzle: Puzzle) -> MoveVerdict:
        self._last_verdict = MoveVerdict.SOLVED
        self._set_status(SessionStatus.SOLVED)
        if self._solve_reported:
            return MoveVerdict.SOLVED
        self._solve_reported = True

        attempts = self._tracker.incorrect_attempts
        hint_used = self._tracker.hint_used
        _LOGGER.info(
            "Solved puzzle %s (incorrect attempts: %d, hint used: %s)",
            puzzle.id,
            attempts,
            hint_used,
        )
        for cb in self.events.on_solve:
            cb(attempts, hint_used)
        return MoveVerdict.SOLVED

    def _cancel_pending(self) -> None:
        if self._pending_task is not None:
            self._pending_task.cancel()
            self._pending_task = None

    def _report_data_error(self, error: DataIntegrityError) -> None:
        for cb in self.events.on_data_error:
            cb(error)

    def _set_status(self, status: SessionStatus) -> None:
        if status == self._status:
            return
        _LOGGER.debug("Session status %s -> %s", self._status.name, status.name)
        self._status = status
        for cb in self.events.on_status_changed:
            cb(status)

    def _emit_position(self) -> None:
        if self._position is None:
            return
        for cb in self.events.on_position_changed:
            cb(self._position)
