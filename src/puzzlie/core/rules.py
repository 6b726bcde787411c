"""Rules-engine seam: legality checks and move application over FEN strings."""

from __future__ import annotations

from abc import ABC, abstractmethod

import chess

from puzzlie.core.enums import Color, PromotionPiece
from puzzlie.core.errors import RulesError
from puzzlie.core.move import PuzzleMove

STARTING_FEN = chess.STARTING_FEN

_PROMOTION_TYPES: dict[PromotionPiece, chess.PieceType] = {
    PromotionPiece.QUEEN: chess.QUEEN,
    PromotionPiece.ROOK: chess.ROOK,
    PromotionPiece.BISHOP: chess.BISHOP,
    PromotionPiece.KNIGHT: chess.KNIGHT,
}


class IRulesEngine(ABC):
    """Interface for the chess rules a puzzle session depends on.

    Positions are opaque strings; implementations decide the encoding
    (FEN for :class:`ChessRules`).
    """

    @abstractmethod
    def is_legal(self, position: str, move: PuzzleMove) -> bool:
        """Is *move* legal in *position*?"""

    @abstractmethod
    def apply(self, position: str, move: PuzzleMove) -> str:
        """Return the position after *move*.

        Raises:
            RulesError: the position is malformed or the move is illegal.
        """

    @abstractmethod
    def side_to_move(self, position: str) -> Color:
        """Which side moves next in *position*."""


class ChessRules(IRulesEngine):
    """python-chess backed rules engine.

    Pawn moves to the last rank without an explicit promotion piece are
    promoted to a queen.
    """

    __slots__ = ()

    def is_legal(self, position: str, move: PuzzleMove) -> bool:
        try:
            board = self._board(position)
        except RulesError:
            return False
        return self._to_chess_move(board, move) in board.legal_moves

    def apply(self, position: str, move: PuzzleMove) -> str:
        board = self._board(position)
        chess_move = self._to_chess_move(board, move)
        if chess_move not in board.legal_moves:
            raise RulesError(f"Illegal move {move} in position {position}")
        board.push(chess_move)
        return board.fen()

    def side_to_move(self, position: str) -> Color:
        board = self._board(position)
        return Color.WHITE if board.turn == chess.WHITE else Color.BLACK

    # ── Internal ─────────────────────────────────────────────────────────

    @staticmethod
    def _board(position: str) -> chess.Board:
        try:
            return chess.Board(position)
        except ValueError as exc:
            raise RulesError(f"Invalid position {position!r}: {exc}") from exc

    @staticmethod
    def _to_chess_move(board: chess.Board, move: PuzzleMove) -> chess.Move:
        from_sq = chess.parse_square(move.from_square)
        to_sq = chess.parse_square(move.to_square)
        promotion: chess.PieceType | None = None
        if move.promotion is not None:
            promotion = _PROMOTION_TYPES[move.promotion]
        elif board.piece_type_at(from_sq) == chess.PAWN and chess.square_rank(
            to_sq
        ) in (0, 7):
            promotion = _PROMOTION_TYPES[PromotionPiece.strongest()]
        return chess.Move(from_sq, to_sq, promotion=promotion)
