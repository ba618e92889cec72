"""Square-threat and check detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import Color, PieceName
from chessrules.core.geometry import position_delta
from chessrules.core.pseudo_legal import PAWN_DIRECTION, move_is_pseudo_legal
from chessrules.core.types import Square

if TYPE_CHECKING:
    from chessrules.core.state import GameState


def color_threatens_square(color: Color, target: Square, state: GameState) -> bool:
    """Is *target* attacked by any piece of *color*?

    Pawns threaten their two forward diagonals only, whether or not an enemy
    stands there; a straight pawn push never threatens.
    """
    for sq in state.occupied_squares(color):
        if sq == target:
            continue
        piece = state[sq]
        assert piece is not None
        if piece.name == PieceName.PAWN:
            dx, dy = position_delta(sq, target)
            if abs(dx) == 1 and dy == PAWN_DIRECTION[color]:
                return True
            continue
        if move_is_pseudo_legal(sq, target, state):
            return True
    return False


def color_is_checked(color: Color, state: GameState) -> bool:
    """Is *color*'s king attacked by the opponent?

    A board without a king for *color* is never in check.
    """
    king_sq = state.king_square(color)
    if king_sq is None:
        return False
    return color_threatens_square(color.opposite, king_sq, state)
