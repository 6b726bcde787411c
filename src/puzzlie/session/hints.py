"""Hint lookup for the next expected move."""

from __future__ import annotations

from collections.abc import Sequence

from puzzlie.core.move import PuzzleMove


class HintProvider:
    """Stateless: reveals only the origin square of the next solution move."""

    __slots__ = ()

    @staticmethod
    def origin_of(solution: Sequence[PuzzleMove], cursor: int) -> str | None:
        if 0 <= cursor < len(solution):
            return solution[cursor].from_square
        return None
