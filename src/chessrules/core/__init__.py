"""Core domain layer: pure chess rules with no external dependencies.

Quick start::

    from chessrules.core import GameState, legal_actions

    state = GameState.new()
    for action in legal_actions(state):
        print(action.as_algebraic_notation(state))
"""

from chessrules.core.actions import (
    PROMOTION_TARGETS,
    Action,
    Capture,
    Castle,
    EnPassant,
    Move,
    Promotion,
)
from chessrules.core.enums import CastleDirection, Color, GameResult, PieceName
from chessrules.core.generator import (
    legal_actions,
    legal_captures,
    legal_castles,
    legal_en_passants,
    legal_moves,
    legal_next_states,
    legal_promotions,
)
from chessrules.core.notation import (
    STARTING_FEN,
    action_to_san,
    parse_pawn_move,
    parse_san,
    position_from_fen,
    position_to_fen,
)
from chessrules.core.piece import Piece
from chessrules.core.pseudo_legal import move_is_pseudo_legal
from chessrules.core.rules import PIECE_VALUES, Rules, piece_value
from chessrules.core.state import GameState
from chessrules.core.threats import color_is_checked, color_threatens_square
from chessrules.core.types import (
    Square,
    algebraic_to_square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_to_algebraic,
)

__all__ = [
    # Enums
    "CastleDirection",
    "Color",
    "GameResult",
    "PieceName",
    # Types / helpers
    "Square",
    "algebraic_to_square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_to_algebraic",
    # Domain objects
    "GameState",
    "Piece",
    "Rules",
    "PIECE_VALUES",
    "piece_value",
    # Actions
    "Action",
    "Capture",
    "Castle",
    "EnPassant",
    "Move",
    "Promotion",
    "PROMOTION_TARGETS",
    # Rules of movement
    "color_is_checked",
    "color_threatens_square",
    "move_is_pseudo_legal",
    # Enumeration
    "legal_actions",
    "legal_captures",
    "legal_castles",
    "legal_en_passants",
    "legal_moves",
    "legal_next_states",
    "legal_promotions",
    # Notation
    "STARTING_FEN",
    "action_to_san",
    "parse_pawn_move",
    "parse_san",
    "position_from_fen",
    "position_to_fen",
]
