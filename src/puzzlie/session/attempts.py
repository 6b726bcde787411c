"""Per-session attempt counters fed to the spaced-repetition scheduler."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True, frozen=True)
class AttemptSummary:
    """What the external scheduler receives once an attempt is over."""

    puzzle_id: str
    incorrect_attempts: int
    hint_used: bool
    solved: bool

    def to_payload(self) -> dict[str, Any]:
        """Attempt record in the scheduler API's field names."""
        return {
            "puzzle_id": self.puzzle_id,
            "tries_count": self.incorrect_attempts,
            "hint_used": self.hint_used,
            "solved": self.solved,
        }


class AttemptTracker:
    """Counts incorrect attempts and remembers whether a hint was shown."""

    __slots__ = ("_incorrect_attempts", "_hint_used")

    def __init__(self) -> None:
        self._incorrect_attempts = 0
        self._hint_used = False

    @property
    def incorrect_attempts(self) -> int:
        return self._incorrect_attempts

    @property
    def hint_used(self) -> bool:
        return self._hint_used

    def reset(self) -> None:
        self._incorrect_attempts = 0
        self._hint_used = False

    def record_incorrect(self) -> int:
        self._incorrect_attempts += 1
        return self._incorrect_attempts

    def record_hint(self) -> None:
        self._hint_used = True

    def summary(self, puzzle_id: str, *, solved: bool) -> AttemptSummary:
        return AttemptSummary(
            puzzle_id=puzzle_id,
            incorrect_attempts=self._incorrect_attempts,
            hint_used=self._hint_used,
            solved=solved,
        )
