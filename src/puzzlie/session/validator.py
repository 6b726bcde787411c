"""Comparison of submitted moves against the expected solution move."""

from __future__ import annotations

from puzzlie.core.move import PuzzleMove


class MoveValidator:
    """Pure square-by-square comparison.

    Promotion pieces are ignored: player promotions are always normalized to
    a queen, while puzzle solutions are authored with a fixed choice.
    """

    __slots__ = ()

    @staticmethod
    def matches(from_square: str, to_square: str, expected: PuzzleMove) -> bool:
        return (
            from_square.strip().lower() == expected.from_square
            and to_square.strip().lower() == expected.to_square
        )

    @classmethod
    def matches_move(cls, submitted: PuzzleMove, expected: PuzzleMove) -> bool:
        return cls.matches(submitted.from_square, submitted.to_square, expected)
