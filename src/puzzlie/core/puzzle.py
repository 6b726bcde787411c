"""Puzzle descriptor: immutable input handed to a puzzle session."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from puzzlie.core.enums import Color
from puzzlie.core.errors import PuzzleFormatError
from puzzlie.core.move import PuzzleMove

_LOGGER = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class Puzzle:
    """A tactical puzzle mined from one of the player's games.

    ``solution`` alternates user moves (even indices) and scripted
    opponent replies (odd indices).
    """

    id: str
    start_fen: str
    player_color: Color
    opening_move: PuzzleMove
    solution: tuple[PuzzleMove, ...]
    rating: int = 0
    themes: tuple[str, ...] = ()
    game_url: str = ""
    player_username: str | None = None
    opponent_username: str | None = None
    game_date: str | None = None
    is_new: bool | None = None

    # ── Derived ──────────────────────────────────────────────────────────

    @property
    def user_move_count(self) -> int:
        """Number of moves the player has to find."""
        return (len(self.solution) + 1) // 2

    # ── Parsing ──────────────────────────────────────────────────────────

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Puzzle:
        """Parse a puzzle descriptor.

        Accepts the local camelCase layout (``startFEN``, ``opponentMove``,
        ``playerColor``, ``gameUrl``) as well as the snake_case layout of
        the puzzle API (``start_fen``, ``opponent_move_from`` /
        ``opponent_move_to``, ``player_color``, ``game_url``).
        """
        if not isinstance(data, Mapping):
            raise PuzzleFormatError(f"Puzzle must be an object, got {type(data)}")

        puzzle_id = _first(data, "id")
        if puzzle_id is None:
            raise PuzzleFormatError("Puzzle is missing field 'id'")

        start_fen = _first(data, "startFEN", "start_fen", "fen")
        if not isinstance(start_fen, str) or not start_fen.strip():
            raise PuzzleFormatError(f"Puzzle {puzzle_id}: missing start position")

        color_name = _first(data, "playerColor", "player_color")
        if not isinstance(color_name, str):
            raise PuzzleFormatError(f"Puzzle {puzzle_id}: missing player color")
        try:
            player_color = Color.from_name(color_name)
        except ValueError as exc:
            raise PuzzleFormatError(f"Puzzle {puzzle_id}: {exc}") from None

        opening = _parse_opening_move(data, str(puzzle_id))

        raw_solution = data.get("solution")
        if not isinstance(raw_solution, list) or not raw_solution:
            raise PuzzleFormatError(
                f"Puzzle {puzzle_id}: solution must be a non-empty list"
            )
        solution = tuple(_parse_move(item) for item in raw_solution)

        themes = data.get("themes") or ()
        if isinstance(themes, str):
            themes = themes.split()

        return cls(
            id=str(puzzle_id),
            start_fen=start_fen.strip(),
            player_color=player_color,
            opening_move=opening,
            solution=solution,
            rating=_parse_rating(data.get("rating")),
            themes=tuple(str(t) for t in themes),
            game_url=str(_first(data, "gameUrl", "game_url") or ""),
            player_username=data.get("player_username"),
            opponent_username=data.get("opponent_username"),
            game_date=data.get("game_date"),
            is_new=data.get("is_new"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the local camelCase layout."""
        return {
            "id": self.id,
            "playerColor": str(self.player_color),
            "startFEN": self.start_fen,
            "opponentMove": self.opening_move.to_dict(),
            "solution": [m.to_dict() for m in self.solution],
            "rating": str(self.rating),
            "themes": list(self.themes),
            "gameUrl": self.game_url,
        }


# ── Loading ──────────────────────────────────────────────────────────────────


def parse_puzzles(data: Any) -> list[Puzzle]:
    """Parse ``{"puzzles": [...]}`` or a bare list of puzzle descriptors."""
    if isinstance(data, Mapping):
        items = data.get("puzzles")
    else:
        items = data
    if not isinstance(items, list):
        raise PuzzleFormatError("Expected a list of puzzles")
    return [Puzzle.from_dict(item) for item in items]


def load_puzzles(path: str | Path) -> list[Puzzle]:
    """Load puzzles from a JSON file."""
    file_path = Path(path)
    try:
        data = json.loads(file_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise PuzzleFormatError(f"{file_path}: invalid JSON: {exc}") from exc
    puzzles = parse_puzzles(data)
    _LOGGER.info("Loaded %d puzzles from %s", len(puzzles), file_path)
    return puzzles


def find_puzzle(puzzles: Iterable[Puzzle], puzzle_id: str) -> Puzzle | None:
    for puzzle in puzzles:
        if puzzle.id == puzzle_id:
            return puzzle
    return None


# ── Internal helpers ─────────────────────────────────────────────────────────


def _first(data: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return None


def _parse_move(item: Any) -> PuzzleMove:
    if isinstance(item, str):
        return PuzzleMove.from_uci(item)
    if isinstance(item, Mapping):
        return PuzzleMove.from_dict(item)
    raise PuzzleFormatError(f"Unsupported move format: {item!r}")


def _parse_opening_move(data: Mapping[str, Any], puzzle_id: str) -> PuzzleMove:
    raw = _first(data, "opponentMove", "opponent_move")
    if raw is not None:
        return _parse_move(raw)
    from_sq = data.get("opponent_move_from")
    to_sq = data.get("opponent_move_to")
    if isinstance(from_sq, str) and isinstance(to_sq, str):
        return PuzzleMove.of(from_sq, to_sq, data.get("opponent_move_promotion"))
    raise PuzzleFormatError(f"Puzzle {puzzle_id}: missing opening move")


def _parse_rating(raw: Any) -> int:
    if raw is None or raw == "":
        return 0
    try:
        return int(float(raw))
    except (TypeError, ValueError, OverflowError):
        raise PuzzleFormatError(f"Invalid rating: {raw!r}") from None
