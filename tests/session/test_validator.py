"""Tests for MoveValidator and HintProvider."""

from puzzlie.core.move import PuzzleMove
from puzzlie.session.hints import HintProvider
from puzzlie.session.validator import MoveValidator

SOLUTION = (
    PuzzleMove("e2", "e4"),
    PuzzleMove("e7", "e5"),
    PuzzleMove("g1", "f3"),
)


class TestMoveValidator:
    def test_same_squares_match(self) -> None:
        assert MoveValidator.matches("g1", "f3", PuzzleMove("g1", "f3"))

    def test_case_insensitive(self) -> None:
        assert MoveValidator.matches("G1", "F3", PuzzleMove("g1", "f3"))

    def test_different_target(self) -> None:
        assert not MoveValidator.matches("g1", "h3", PuzzleMove("g1", "f3"))

    def test_different_origin(self) -> None:
        assert not MoveValidator.matches("b1", "c3", PuzzleMove("g1", "f3"))

    def test_promotion_ignored(self) -> None:
        submitted = PuzzleMove.of("a7", "a8", "q")
        expected = PuzzleMove.of("a7", "a8", "n")
        assert MoveValidator.matches_move(submitted, expected)


class TestHintProvider:
    def test_origin_at_cursor(self) -> None:
        assert HintProvider.origin_of(SOLUTION, 0) == "e2"
        assert HintProvider.origin_of(SOLUTION, 2) == "g1"

    def test_out_of_bounds(self) -> None:
        assert HintProvider.origin_of(SOLUTION, 3) is None
        assert HintProvider.origin_of(SOLUTION, -1) is None
        assert HintProvider.origin_of((), 0) is None
