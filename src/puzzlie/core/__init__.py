"""Core domain layer: puzzle data, moves and the rules-engine seam.

Quick start::

    from puzzlie.core import ChessRules, load_puzzles, validate_puzzle

    rules = ChessRules()
    for puzzle in load_puzzles("puzzles.json"):
        problems = validate_puzzle(puzzle, rules)
"""

from puzzlie.core.enums import Color, PromotionPiece
from puzzlie.core.errors import (
    DataIntegrityError,
    PuzzleError,
    PuzzleFormatError,
    RulesError,
)
from puzzlie.core.move import PuzzleMove, is_square_name, normalize_square
from puzzlie.core.puzzle import Puzzle, find_puzzle, load_puzzles, parse_puzzles
from puzzlie.core.rules import STARTING_FEN, ChessRules, IRulesEngine
from puzzlie.core.validation import validate_puzzle

__all__ = [
    "STARTING_FEN",
    "ChessRules",
    "Color",
    "DataIntegrityError",
    "IRulesEngine",
    "PromotionPiece",
    "Puzzle",
    "PuzzleError",
    "PuzzleFormatError",
    "PuzzleMove",
    "RulesError",
    "find_puzzle",
    "is_square_name",
    "load_puzzles",
    "normalize_square",
    "parse_puzzles",
    "validate_puzzle",
]
