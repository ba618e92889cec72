"""Notation package: FEN and algebraic notation."""

from chessrules.core.notation.fen import STARTING_FEN, position_from_fen, position_to_fen
from chessrules.core.notation.san import (
    action_to_san,
    ambiguous_origins,
    disambiguation,
    parse_pawn_move,
    parse_san,
)

__all__ = [
    "STARTING_FEN",
    "position_from_fen",
    "position_to_fen",
    "action_to_san",
    "ambiguous_origins",
    "disambiguation",
    "parse_pawn_move",
    "parse_san",
]
