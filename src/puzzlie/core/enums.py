"""Core enumerations for the puzzle domain."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @classmethod
    def from_name(cls, name: str) -> Color:
        """Parse ``"white"`` / ``"black"`` (case-insensitive, ``w``/``b`` too)."""
        key = name.strip().lower()
        if key in ("white", "w"):
            return cls.WHITE
        if key in ("black", "b"):
            return cls.BLACK
        raise ValueError(f"Unknown color: {name!r}")

    def __str__(self) -> str:
        return self.name.lower()


class PromotionPiece(StrEnum):
    """Promotion piece letters as used in UCI notation."""

    QUEEN = "q"
    ROOK = "r"
    BISHOP = "b"
    KNIGHT = "n"

    @classmethod
    def strongest(cls) -> PromotionPiece:
        return cls.QUEEN
