"""Abstract interfaces and state enums for the puzzle session layer.

PuzzleSession depends on these ABCs, not on a concrete scheduler, so the
same state machine runs under a Qt event loop or synchronously in tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum, StrEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from puzzlie.core.puzzle import Puzzle


# ── Session FSM states ───────────────────────────────────────────────────────


class SessionStatus(IntEnum):
    """Finite-state-machine states of a puzzle session."""

    INITIAL = auto()
    OPPONENT_INTRO_MOVE = auto()  # opening move scheduled, not yet shown
    AWAITING_USER_MOVE = auto()
    RESOLVING = auto()
    SOLVED = auto()


class MoveVerdict(StrEnum):
    """Result of :meth:`IPuzzleSession.submit_move`."""

    REJECTED = "rejected"  # session not accepting moves
    ILLEGAL = "illegal"
    INCORRECT = "incorrect"
    CORRECT = "correct"
    SOLVED = "solved"


# ── Configuration ────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class SessionConfig:
    """Immutable session settings.

    Args:
        opening_move_delay_ms: Pause before the opening move is played,
            so the player sees the starting position first.
    """

    opening_move_delay_ms: int = 1000

    def __post_init__(self) -> None:
        if self.opening_move_delay_ms < 0:
            raise ValueError("opening_move_delay_ms must be >= 0")

    # Presets
    @classmethod
    def instant(cls) -> SessionConfig:
        return cls(0)

    @classmethod
    def paced(cls) -> SessionConfig:
        """Default pacing of the web trainer."""
        return cls(1000)


# ── Deferred tasks ───────────────────────────────────────────────────────────


class IScheduledTask(ABC):
    """Handle to a continuation queued on an :class:`IScheduler`."""

    __slots__ = ()

    @property
    @abstractmethod
    def is_pending(self) -> bool:
        """Not yet run and not cancelled."""

    @abstractmethod
    def cancel(self) -> None:
        """Prevent the continuation from running. Idempotent."""


class IScheduler(ABC):
    """Runs a callback later, on the thread that owns the session."""

    __slots__ = ()

    @abstractmethod
    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> IScheduledTask:
        """Queue *callback* to run after roughly *delay_ms* milliseconds."""


# ── Session ──────────────────────────────────────────────────────────────────


class IPuzzleSession(ABC):
    """Interface for the puzzle-solving state machine."""

    @abstractmethod
    def start(self, puzzle: Puzzle) -> None:
        """Load *puzzle* and schedule its opening move."""

    @abstractmethod
    def submit_move(self, from_square: str, to_square: str) -> MoveVerdict:
        """Submit the player's move."""

    @abstractmethod
    def reset(self) -> None:
        """Restart the current puzzle from scratch."""

    @abstractmethod
    def request_hint(self) -> str | None:
        """Origin square of the next expected move, or None."""
