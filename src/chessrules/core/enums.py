"""Core enumerations for the chess rules domain."""

from __future__ import annotations

from enum import Enum, IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceName(IntEnum):
    """Chess piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class CastleDirection(Enum):
    """Which rook the king castles with."""

    KINGSIDE = "kingside"
    QUEENSIDE = "queenside"


class GameResult(IntEnum):
    """Outcome derived from a single position."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3
