"""Exception hierarchy for puzzle data and rules failures."""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for all puzzle-related errors."""


class PuzzleFormatError(PuzzleError, ValueError):
    """Raised when a puzzle descriptor cannot be parsed."""


class RulesError(PuzzleError):
    """Raised by a rules engine when a move cannot be applied to a position."""


class DataIntegrityError(PuzzleError):
    """A scripted puzzle move could not be applied.

    Never raised out of a session; instances are logged and handed to
    ``on_data_error`` listeners as a diagnostic record.
    """

    def __init__(self, puzzle_id: str, index: int | None, message: str) -> None:
        self.puzzle_id = puzzle_id
        # None for the opening move, otherwise the solution index.
        self.index = index
        self.message = message
        where = "opening move" if index is None else f"solution[{index}]"
        super().__init__(f"Puzzle {puzzle_id}: {where}: {message}")
