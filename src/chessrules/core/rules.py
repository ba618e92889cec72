"""High-level chess rules: check, checkmate, stalemate, material."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import Color, GameResult, PieceName
from chessrules.core.generator import legal_actions
from chessrules.core.threats import color_is_checked

if TYPE_CHECKING:
    from chessrules.core.state import GameState

PIECE_VALUES: dict[PieceName, int] = {
    PieceName.PAWN: 1,
    PieceName.KNIGHT: 3,
    PieceName.BISHOP: 3,
    PieceName.ROOK: 5,
    PieceName.QUEEN: 9,
    PieceName.KING: 0,
}


def piece_value(name: PieceName) -> int:
    return PIECE_VALUES[name]


class Rules:
    """Static rule-checker that operates on a :class:`GameState`."""

    # Repetition and fifty-move draws need game history, which a single
    # position does not carry; only stalemate is recognised as a draw.

    @staticmethod
    def is_in_check(state: GameState) -> bool:
        return color_is_checked(state.to_move, state)

    @staticmethod
    def is_checkmate(state: GameState) -> bool:
        if not Rules.is_in_check(state):
            return False
        return len(legal_actions(state)) == 0

    @staticmethod
    def is_stalemate(state: GameState) -> bool:
        if Rules.is_in_check(state):
            return False
        return len(legal_actions(state)) == 0

    @staticmethod
    def game_result(state: GameState) -> GameResult:
        """Determine the result implied by the position alone."""
        if legal_actions(state):
            return GameResult.IN_PROGRESS
        if Rules.is_in_check(state):
            return (
                GameResult.BLACK_WINS
                if state.to_move == Color.WHITE
                else GameResult.WHITE_WINS
            )
        return GameResult.DRAW  # stalemate

    @staticmethod
    def relative_material_values(state: GameState) -> tuple[int, int]:
        """Point count per side as ``(white, black)``."""
        totals = {Color.WHITE: 0, Color.BLACK: 0}
        for piece in state.squares:
            if piece is not None:
                totals[piece.color] += PIECE_VALUES[piece.name]
        return totals[Color.WHITE], totals[Color.BLACK]
