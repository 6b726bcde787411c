"""Tests for puzzle descriptor parsing and loading."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from puzzlie.core.enums import Color
from puzzlie.core.errors import PuzzleFormatError
from puzzlie.core.move import PuzzleMove
from puzzlie.core.puzzle import Puzzle, find_puzzle, load_puzzles, parse_puzzles

DataFactory = Callable[..., dict[str, object]]


class TestFromDict:
    def test_camel_case_layout(self, open_game_data: DataFactory) -> None:
        p = Puzzle.from_dict(open_game_data())
        assert p.id == "open-game"
        assert p.player_color == Color.WHITE
        assert p.opening_move == PuzzleMove("e7", "e5")
        assert [m.uci for m in p.solution] == ["g1f3", "b8c6", "f1c4"]
        assert p.rating == 1450
        assert p.themes == ("opening", "development")
        assert p.game_url == "https://lichess.org/abcd1234"

    def test_api_layout(self) -> None:
        p = Puzzle.from_dict(
            {
                "id": 42,
                "player_username": "alice",
                "opponent_username": "bob",
                "game_date": "2024-03-01",
                "player_color": "black",
                "start_fen": "4k3/8/8/8/8/8/4P3/4K3 w - - 0 1",
                "opponent_move_from": "e2",
                "opponent_move_to": "e4",
                "solution": ["e8d7"],
                "rating": 1612,
                "themes": ["endgame"],
                "game_url": "https://lichess.org/xyz",
                "is_new": True,
            }
        )
        assert p.id == "42"
        assert p.player_color == Color.BLACK
        assert p.opening_move == PuzzleMove("e2", "e4")
        assert p.solution == (PuzzleMove("e8", "d7"),)
        assert p.rating == 1612
        assert p.player_username == "alice"
        assert p.opponent_username == "bob"
        assert p.is_new is True

    def test_user_move_count(self, open_game_data: DataFactory) -> None:
        assert Puzzle.from_dict(open_game_data()).user_move_count == 2

    def test_missing_id(self, open_game_data: DataFactory) -> None:
        data = open_game_data()
        del data["id"]
        with pytest.raises(PuzzleFormatError, match="id"):
            Puzzle.from_dict(data)

    def test_missing_opening_move(self, open_game_data: DataFactory) -> None:
        data = open_game_data()
        del data["opponentMove"]
        with pytest.raises(PuzzleFormatError, match="opening move"):
            Puzzle.from_dict(data)

    def test_empty_solution(self, open_game_data: DataFactory) -> None:
        with pytest.raises(PuzzleFormatError, match="solution"):
            Puzzle.from_dict(open_game_data(solution=[]))

    def test_bad_color(self, open_game_data: DataFactory) -> None:
        with pytest.raises(PuzzleFormatError):
            Puzzle.from_dict(open_game_data(playerColor="purple"))

    def test_bad_rating(self, open_game_data: DataFactory) -> None:
        with pytest.raises(PuzzleFormatError, match="rating"):
            Puzzle.from_dict(open_game_data(rating="strong"))

    @pytest.mark.parametrize("rating", ["inf", "-inf", "nan"])
    def test_non_finite_rating(self, open_game_data: DataFactory, rating: str) -> None:
        with pytest.raises(PuzzleFormatError, match="rating"):
            Puzzle.from_dict(open_game_data(rating=rating))

    def test_format_error_is_value_error(self, open_game_data: DataFactory) -> None:
        with pytest.raises(ValueError):
            Puzzle.from_dict(open_game_data(solution="g1f3"))

    def test_round_trip_through_to_dict(self, open_game_data: DataFactory) -> None:
        p = Puzzle.from_dict(open_game_data())
        assert Puzzle.from_dict(p.to_dict()) == p

    def test_frozen(self, open_game_puzzle: Puzzle) -> None:
        with pytest.raises(AttributeError):
            open_game_puzzle.rating = 2000  # type: ignore[misc]


class TestLoading:
    def test_parse_wrapped_list(self, open_game_data: DataFactory) -> None:
        puzzles = parse_puzzles({"puzzles": [open_game_data(), open_game_data(id="b")]})
        assert [p.id for p in puzzles] == ["open-game", "b"]

    def test_parse_bare_list(self, open_game_data: DataFactory) -> None:
        assert len(parse_puzzles([open_game_data()])) == 1

    def test_parse_rejects_non_list(self) -> None:
        with pytest.raises(PuzzleFormatError):
            parse_puzzles({"puzzles": "nope"})

    def test_load_from_file(self, tmp_path: Path, open_game_data: DataFactory) -> None:
        path = tmp_path / "puzzles.json"
        path.write_text(json.dumps({"puzzles": [open_game_data()]}), encoding="utf-8")
        puzzles = load_puzzles(path)
        assert len(puzzles) == 1
        assert puzzles[0].id == "open-game"

    def test_load_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(PuzzleFormatError, match="invalid JSON"):
            load_puzzles(path)

    def test_find_puzzle(self, open_game_data: DataFactory) -> None:
        puzzles = parse_puzzles([open_game_data(), open_game_data(id="b")])
        found = find_puzzle(puzzles, "b")
        assert found is not None and found.id == "b"
        assert find_puzzle(puzzles, "missing") is None
