"""PuzzleMove value object (square-name representation)."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from puzzlie.core.enums import PromotionPiece
from puzzlie.core.errors import PuzzleFormatError

_FILES = "abcdefgh"
_RANKS = "12345678"


def is_square_name(name: str) -> bool:
    """Return True for algebraic square names such as ``"e4"``."""
    return len(name) == 2 and name[0] in _FILES and name[1] in _RANKS


def normalize_square(name: str) -> str:
    """Lower-case and validate a square name."""
    sq = name.strip().lower()
    if not is_square_name(sq):
        raise PuzzleFormatError(f"Invalid square: {name!r}")
    return sq


@dataclass(frozen=True, slots=True)
class PuzzleMove:
    """Immutable move as authored in puzzle data: origin, target, promotion."""

    from_square: str
    to_square: str
    promotion: PromotionPiece | None = None

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def of(
        cls, from_square: str, to_square: str, promotion: str | None = None
    ) -> PuzzleMove:
        """Build a move from raw strings, normalizing squares and promotion."""
        promo: PromotionPiece | None = None
        if promotion:
            try:
                promo = PromotionPiece(promotion.strip().lower())
            except ValueError:
                raise PuzzleFormatError(
                    f"Invalid promotion piece: {promotion!r}"
                ) from None
        return cls(normalize_square(from_square), normalize_square(to_square), promo)

    @classmethod
    def from_uci(cls, uci: str) -> PuzzleMove:
        text = uci.strip()
        if len(text) not in (4, 5):
            raise PuzzleFormatError(f"Invalid UCI move: {uci!r}")
        return cls.of(text[:2], text[2:4], text[4:] or None)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PuzzleMove:
        """Parse ``{"from": "e2", "to": "e4", "promotion": "q"?}``."""
        try:
            from_sq = data["from"]
            to_sq = data["to"]
        except KeyError as exc:
            raise PuzzleFormatError(f"Move is missing field {exc}") from None
        if not isinstance(from_sq, str) or not isinstance(to_sq, str):
            raise PuzzleFormatError(f"Move squares must be strings: {data!r}")
        return cls.of(from_sq, to_sq, data.get("promotion"))

    # ── Display / export ─────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{self.from_square}{self.to_square}"
        if self.promotion is not None:
            base += self.promotion.value
        return base

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return str(self)

    def to_dict(self) -> dict[str, str]:
        data = {"from": self.from_square, "to": self.to_square}
        if self.promotion is not None:
            data["promotion"] = self.promotion.value
        return data
