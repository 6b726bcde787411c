"""Offline sanity checks for authored puzzle data."""

from __future__ import annotations

import logging

from puzzlie.core.errors import RulesError
from puzzlie.core.puzzle import Puzzle
from puzzlie.core.rules import ChessRules, IRulesEngine

_LOGGER = logging.getLogger(__name__)


def validate_puzzle(puzzle: Puzzle, rules: IRulesEngine | None = None) -> list[str]:
    """Replay the opening move and the whole solution.

    Returns a list of human-readable problems; empty when the puzzle is
    playable from start to finish.
    """
    engine = rules or ChessRules()
    prefix = f"Puzzle {puzzle.id}"
    errors: list[str] = []

    if not puzzle.solution:
        errors.append(f"{prefix}: empty solution")
        return errors

    try:
        position = engine.apply(puzzle.start_fen, puzzle.opening_move)
    except RulesError as exc:
        errors.append(f"{prefix}: opening move {puzzle.opening_move} failed: {exc}")
        return errors

    if engine.side_to_move(position) != puzzle.player_color:
        errors.append(
            f"{prefix}: player color is {puzzle.player_color} but "
            f"{engine.side_to_move(position)} is to move after the opening move"
        )

    for i, move in enumerate(puzzle.solution):
        try:
            position = engine.apply(position, move)
        except RulesError as exc:
            errors.append(f"{prefix}: solution[{i}] {move} failed: {exc}")
            break

    for message in errors:
        _LOGGER.warning(message)
    return errors
