"""Per-piece movement geometry, ignorant of check.

Each predicate answers "may the piece on *origin* travel to *destination*"
using only its movement pattern and path obstruction. Whether the destination
is empty or holds an enemy is decided by the action that uses the predicate.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from chessrules.core.enums import Color, PieceName
from chessrules.core.geometry import (
    diagonal_path_is_obstructed,
    horizontal_path_is_obstructed,
    position_delta,
    vertical_path_is_obstructed,
)
from chessrules.core.types import Square

if TYPE_CHECKING:
    from chessrules.core.state import GameState

# Origins from which a pawn may advance two squares.
PAWN_HOME_RANKS: dict[Color, range] = {
    Color.WHITE: range(8, 16),
    Color.BLACK: range(48, 56),
}
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: -1}


def pawn_move_is_legal(origin: Square, destination: Square, state: GameState) -> bool:
    piece = state[origin]
    assert piece is not None
    dx, dy = position_delta(origin, destination)
    forward = PAWN_DIRECTION[piece.color]

    if dx == 0:
        if dy == forward:
            return True
        if dy == 2 * forward:
            return origin in PAWN_HOME_RANKS[piece.color] and state.is_empty(
                origin + 8 * forward
            )
        return False

    if abs(dx) == 1 and dy == forward:
        target = state[destination]
        if target is not None:
            return target.color != piece.color
        return destination == state.en_passant_square
    return False


def rook_move_is_legal(origin: Square, destination: Square, state: GameState) -> bool:
    dx, dy = position_delta(origin, destination)
    if dy == 0 and dx != 0:
        return not horizontal_path_is_obstructed(origin, dx, state)
    if dx == 0 and dy != 0:
        return not vertical_path_is_obstructed(origin, dy, state)
    return False


def bishop_move_is_legal(origin: Square, destination: Square, state: GameState) -> bool:
    dx, dy = position_delta(origin, destination)
    if dx == 0 or abs(dx) != abs(dy):
        return False
    return not diagonal_path_is_obstructed(origin, destination, state)


def knight_move_is_legal(origin: Square, destination: Square, state: GameState) -> bool:
    dx, dy = position_delta(origin, destination)
    return (abs(dx), abs(dy)) in ((1, 2), (2, 1))


def queen_move_is_legal(origin: Square, destination: Square, state: GameState) -> bool:
    return rook_move_is_legal(origin, destination, state) or bishop_move_is_legal(
        origin, destination, state
    )


def king_move_is_legal(origin: Square, destination: Square, state: GameState) -> bool:
    # Adjacent squares have no intermediate path to scan.
    dx, dy = position_delta(origin, destination)
    return max(abs(dx), abs(dy)) == 1


_RULES: dict[PieceName, Callable[[Square, Square, "GameState"], bool]] = {
    PieceName.PAWN: pawn_move_is_legal,
    PieceName.ROOK: rook_move_is_legal,
    PieceName.BISHOP: bishop_move_is_legal,
    PieceName.KNIGHT: knight_move_is_legal,
    PieceName.QUEEN: queen_move_is_legal,
    PieceName.KING: king_move_is_legal,
}


def move_is_pseudo_legal(origin: Square, destination: Square, state: GameState) -> bool:
    """Whether the piece on *origin* may geometrically reach *destination*."""
    piece = state[origin]
    if piece is None:
        return False
    return _RULES[piece.name](origin, destination, state)
