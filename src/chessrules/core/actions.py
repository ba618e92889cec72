"""Actions - the five kinds of transition between two game states.

Every action answers the same three questions about a :class:`GameState`:

* ``is_legal(state)`` - may the side to move perform it?
* ``apply(state)`` - the position after performing it. ``apply`` does not
  re-validate; ``is_legal`` itself calls ``apply`` to test whether the mover's
  king would be left in check, so ``apply`` must stay free of side effects.
* ``as_algebraic_notation(state)`` - algebraic string, ``""`` when illegal.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import ClassVar, TypeAlias

from chessrules.core.enums import CastleDirection, Color, PieceName
from chessrules.core.geometry import movement_is_vertical, position_delta
from chessrules.core.piece import Piece
from chessrules.core.pseudo_legal import PAWN_DIRECTION, move_is_pseudo_legal
from chessrules.core.state import GameState
from chessrules.core.threats import color_is_checked, color_threatens_square
from chessrules.core.types import (
    A1,
    A8,
    B1,
    B8,
    C1,
    C8,
    D1,
    D8,
    E1,
    E8,
    F1,
    F8,
    G1,
    G8,
    H1,
    H8,
    Square,
    is_valid_square,
    rank_of,
)

PROMOTION_TARGETS: tuple[PieceName, ...] = (
    PieceName.QUEEN,
    PieceName.ROOK,
    PieceName.BISHOP,
    PieceName.KNIGHT,
)

_LAST_RANK: dict[Color, int] = {Color.WHITE: 7, Color.BLACK: 0}
_PROMOTION_ORIGIN_RANK: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}


# ── Castling bookkeeping ────────────────────────────────────────────────────

_ROOK_CORNERS: dict[Square, str] = {
    A1: "white_can_castle_queenside",
    H1: "white_can_castle_kingside",
    A8: "black_can_castle_queenside",
    H8: "black_can_castle_kingside",
}

_KING_RIGHTS: dict[Color, tuple[str, str]] = {
    Color.WHITE: ("white_can_castle_kingside", "white_can_castle_queenside"),
    Color.BLACK: ("black_can_castle_kingside", "black_can_castle_queenside"),
}


@dataclass(frozen=True, slots=True)
class _CastleLayout:
    right: str
    king_from: Square
    king_to: Square
    rook_from: Square
    rook_to: Square
    between: tuple[Square, ...]
    king_path: tuple[Square, ...]


_CASTLE_LAYOUTS: dict[tuple[Color, CastleDirection], _CastleLayout] = {
    (Color.WHITE, CastleDirection.KINGSIDE): _CastleLayout(
        "white_can_castle_kingside", E1, G1, H1, F1, (F1, G1), (E1, F1, G1)
    ),
    (Color.WHITE, CastleDirection.QUEENSIDE): _CastleLayout(
        "white_can_castle_queenside", E1, C1, A1, D1, (B1, C1, D1), (E1, D1, C1)
    ),
    (Color.BLACK, CastleDirection.KINGSIDE): _CastleLayout(
        "black_can_castle_kingside", E8, G8, H8, F8, (F8, G8), (E8, F8, G8)
    ),
    (Color.BLACK, CastleDirection.QUEENSIDE): _CastleLayout(
        "black_can_castle_queenside", E8, C8, A8, D8, (B8, C8, D8), (E8, D8, C8)
    ),
}


def _next_state(
    state: GameState,
    board: list[Piece | None],
    mover: Piece,
    touched: tuple[Square, ...],
    en_passant: Square | None = None,
) -> GameState:
    """Hand the turn over after *mover* acted on the *touched* squares.

    Revokes castling rights when a king moves or a rook leaves (or is
    captured on) its corner. The en-passant target is always replaced.
    """
    revoked: dict[str, bool] = {}
    if mover.name == PieceName.KING:
        for right in _KING_RIGHTS[mover.color]:
            revoked[right] = False
    for sq in touched:
        if sq in _ROOK_CORNERS:
            revoked[_ROOK_CORNERS[sq]] = False

    return replace(
        state,
        squares=tuple(board),
        to_move=state.to_move.opposite,
        en_passant_square=en_passant,
        **revoked,
    )


def _keeps_king_safe(action: Action, state: GameState) -> bool:
    return not color_is_checked(state.to_move, action.apply(state))


def _notation(action: Action, state: GameState) -> str:
    if not action.is_legal(state):
        return ""
    from chessrules.core.notation.san import action_to_san

    return action_to_san(state, action)


def _pawn_reaches_last_rank(piece: Piece, destination: Square) -> bool:
    return piece.name == PieceName.PAWN and rank_of(destination) == _LAST_RANK[piece.color]


# ── Variants ────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class Move:
    """Non-capturing relocation of one piece."""

    name: ClassVar[str] = "Move"

    from_sq: Square
    to_sq: Square

    def is_legal(self, state: GameState) -> bool:
        if not (is_valid_square(self.from_sq) and is_valid_square(self.to_sq)):
            return False
        if self.from_sq == self.to_sq:
            return False
        piece = state[self.from_sq]
        if piece is None or piece.color != state.to_move:
            return False
        if state[self.to_sq] is not None:
            return False
        if piece.name == PieceName.PAWN:
            # Diagonal pawn steps are captures; last-rank arrivals are promotions.
            if not movement_is_vertical(self.from_sq, self.to_sq):
                return False
            if _pawn_reaches_last_rank(piece, self.to_sq):
                return False
        if not move_is_pseudo_legal(self.from_sq, self.to_sq, state):
            return False
        return _keeps_king_safe(self, state)

    def apply(self, state: GameState) -> GameState:
        piece = state[self.from_sq]
        assert piece is not None, f"No piece on {self.from_sq}"

        board = list(state.squares)
        board[self.to_sq] = piece
        board[self.from_sq] = None

        en_passant: Square | None = None
        _dx, dy = position_delta(self.from_sq, self.to_sq)
        if piece.name == PieceName.PAWN and abs(dy) == 2:
            en_passant = self.from_sq + 8 * PAWN_DIRECTION[piece.color]

        return _next_state(state, board, piece, (self.from_sq, self.to_sq), en_passant)

    def as_algebraic_notation(self, state: GameState) -> str:
        return _notation(self, state)


@dataclass(frozen=True, slots=True)
class Capture:
    """Relocation of one piece onto a square held by an enemy piece."""

    name: ClassVar[str] = "Capture"

    with_sq: Square
    on_sq: Square

    def is_legal(self, state: GameState) -> bool:
        if not (is_valid_square(self.with_sq) and is_valid_square(self.on_sq)):
            return False
        if self.with_sq == self.on_sq:
            return False
        attacker = state[self.with_sq]
        defender = state[self.on_sq]
        if attacker is None or defender is None:
            return False
        if attacker.color != state.to_move:
            return False
        if defender.color == state.to_move:
            return False
        if attacker.name == PieceName.PAWN:
            # Straight ahead is pseudo-legal for a pawn, but never a capture.
            if movement_is_vertical(self.with_sq, self.on_sq):
                return False
            if _pawn_reaches_last_rank(attacker, self.on_sq):
                return False
        if not move_is_pseudo_legal(self.with_sq, self.on_sq, state):
            return False
        return _keeps_king_safe(self, state)

    def apply(self, state: GameState) -> GameState:
        attacker = state[self.with_sq]
        assert attacker is not None, f"No piece on {self.with_sq}"

        board = list(state.squares)
        board[self.on_sq] = attacker
        board[self.with_sq] = None
        return _next_state(state, board, attacker, (self.with_sq, self.on_sq))

    def as_algebraic_notation(self, state: GameState) -> str:
        return _notation(self, state)


@dataclass(frozen=True, slots=True)
class EnPassant:
    """Pawn on *with_sq* capturing onto the current en-passant square."""

    name: ClassVar[str] = "EnPassant"

    with_sq: Square

    def is_legal(self, state: GameState) -> bool:
        destination = state.en_passant_square
        if destination is None or not is_valid_square(destination):
            return False
        if not is_valid_square(self.with_sq):
            return False
        pawn = state[self.with_sq]
        if pawn is None or pawn.name != PieceName.PAWN or pawn.color != state.to_move:
            return False
        forward = PAWN_DIRECTION[pawn.color]
        dx, dy = position_delta(self.with_sq, destination)
        if abs(dx) != 1 or dy != forward:
            return False
        if not state.is_empty(destination):
            return False
        if not state.piece_is(pawn.color.opposite, PieceName.PAWN, destination - 8 * forward):
            return False
        return _keeps_king_safe(self, state)

    def captured_square(self, state: GameState) -> Square:
        """Square of the pawn removed by this capture."""
        pawn = state[self.with_sq]
        assert pawn is not None and state.en_passant_square is not None
        return state.en_passant_square - 8 * PAWN_DIRECTION[pawn.color]

    def apply(self, state: GameState) -> GameState:
        pawn = state[self.with_sq]
        destination = state.en_passant_square
        assert pawn is not None and destination is not None

        board = list(state.squares)
        board[self.captured_square(state)] = None
        board[destination] = pawn
        board[self.with_sq] = None
        return _next_state(state, board, pawn, (self.with_sq, destination))

    def as_algebraic_notation(self, state: GameState) -> str:
        return _notation(self, state)


@dataclass(frozen=True, slots=True)
class Castle:
    """King and rook moving together on the side to move's back rank."""

    name: ClassVar[str] = "Castle"

    direction: CastleDirection

    def layout(self, color: Color) -> _CastleLayout:
        return _CASTLE_LAYOUTS[(color, self.direction)]

    def is_legal(self, state: GameState) -> bool:
        color = state.to_move
        layout = self.layout(color)
        if not getattr(state, layout.right):
            return False
        if not state.piece_is(color, PieceName.KING, layout.king_from):
            return False
        if not state.piece_is(color, PieceName.ROOK, layout.rook_from):
            return False
        if any(not state.is_empty(sq) for sq in layout.between):
            return False
        # Out of, through and into check.
        opponent = color.opposite
        if any(color_threatens_square(opponent, sq, state) for sq in layout.king_path):
            return False
        return _keeps_king_safe(self, state)

    def apply(self, state: GameState) -> GameState:
        layout = self.layout(state.to_move)
        king = state[layout.king_from]
        rook = state[layout.rook_from]
        assert king is not None and rook is not None

        board = list(state.squares)
        board[layout.king_from] = None
        board[layout.rook_from] = None
        board[layout.king_to] = king
        board[layout.rook_to] = rook
        return _next_state(state, board, king, (layout.king_from, layout.rook_from))

    def as_algebraic_notation(self, state: GameState) -> str:
        return _notation(self, state)


@dataclass(frozen=True, slots=True)
class Promotion:
    """Pawn stepping onto its last rank, straight or capturing, and changing kind."""

    name: ClassVar[str] = "Promotion"

    moving_from: Square
    to_sq: Square
    pawn_becomes: PieceName

    def is_legal(self, state: GameState) -> bool:
        if self.pawn_becomes not in PROMOTION_TARGETS:
            return False
        if not (is_valid_square(self.moving_from) and is_valid_square(self.to_sq)):
            return False
        pawn = state[self.moving_from]
        if pawn is None or pawn.name != PieceName.PAWN or pawn.color != state.to_move:
            return False
        if rank_of(self.moving_from) != _PROMOTION_ORIGIN_RANK[pawn.color]:
            return False

        dx, dy = position_delta(self.moving_from, self.to_sq)
        if dy != PAWN_DIRECTION[pawn.color]:
            return False
        target = state[self.to_sq]
        if dx == 0:
            if target is not None:
                return False
        elif abs(dx) == 1:
            if target is None or target.color == pawn.color:
                return False
        else:
            return False
        return _keeps_king_safe(self, state)

    @property
    def is_capture(self) -> bool:
        return not movement_is_vertical(self.moving_from, self.to_sq)

    def apply(self, state: GameState) -> GameState:
        pawn = state[self.moving_from]
        assert pawn is not None, f"No piece on {self.moving_from}"

        board = list(state.squares)
        board[self.moving_from] = None
        board[self.to_sq] = Piece(pawn.color, self.pawn_becomes)
        return _next_state(state, board, pawn, (self.moving_from, self.to_sq))

    def as_algebraic_notation(self, state: GameState) -> str:
        return _notation(self, state)


Action: TypeAlias = Move | Capture | EnPassant | Castle | Promotion
