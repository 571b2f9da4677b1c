"""Piece kinds, sides and the pieces that stand on the board."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PieceType(Enum):
    """Kind of piece; the value is the letter shown on the board."""

    EMPTY = "."
    PAWN = "P"
    KNIGHT = "N"
    BISHOP = "B"
    ROOK = "R"
    QUEEN = "Q"
    KING = "K"


class Color(Enum):
    """Side a piece belongs to."""

    WHITE = "white"
    BLACK = "black"

    def opponent(self) -> Color:
        """Return the other side."""
        return Color.BLACK if self is Color.WHITE else Color.WHITE


@dataclass(frozen=True)
class Piece:
    """A piece, or an empty square when its type is EMPTY."""

    type: PieceType = PieceType.EMPTY
    color: Color = Color.WHITE

    def symbol(self) -> str:
        """Return the one-letter board symbol of this piece."""
        return self.type.value