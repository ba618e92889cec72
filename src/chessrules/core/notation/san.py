"""Algebraic notation: rendering, disambiguation and single-move lookup."""

from __future__ import annotations

from chessrules.core.actions import (
    Action,
    Capture,
    Castle,
    EnPassant,
    Move,
    Promotion,
)
from chessrules.core.enums import CastleDirection, PieceName
from chessrules.core.generator import legal_actions
from chessrules.core.piece import Piece
from chessrules.core.pseudo_legal import PAWN_DIRECTION
from chessrules.core.state import GameState
from chessrules.core.types import (
    Square,
    algebraic_to_square,
    file_of,
    is_valid_square,
    parse_square,
    rank_of,
    square_to_algebraic,
)

_SAN_PIECE_REV: dict[str, PieceName] = {
    "N": PieceName.KNIGHT,
    "B": PieceName.BISHOP,
    "R": PieceName.ROOK,
    "Q": PieceName.QUEEN,
    "K": PieceName.KING,
}


def _file_char(sq: Square) -> str:
    return chr(ord("a") + file_of(sq))


def _endpoints(state: GameState, action: Action) -> tuple[Square, Square]:
    """Origin and destination of the moving piece (the king, for castling)."""
    if isinstance(action, Move):
        return action.from_sq, action.to_sq
    if isinstance(action, Capture):
        return action.with_sq, action.on_sq
    if isinstance(action, EnPassant):
        assert state.en_passant_square is not None
        return action.with_sq, state.en_passant_square
    if isinstance(action, Promotion):
        return action.moving_from, action.to_sq
    layout = action.layout(state.to_move)
    return layout.king_from, layout.king_to


# ── Disambiguation ───────────────────────────────────────────────────────────


def ambiguous_origins(
    state: GameState, origin: Square, destination: Square, capture: bool
) -> list[Square]:
    """Other squares whose like piece could make the same move or capture."""
    piece = state[origin]
    assert piece is not None
    rivals: list[Square] = []
    for sq in state.occupied_squares(piece.color):
        if sq == origin or state[sq] != piece:
            continue
        rival: Action = Capture(sq, destination) if capture else Move(sq, destination)
        if rival.is_legal(state):
            rivals.append(sq)
    return rivals


def disambiguation(
    state: GameState, origin: Square, destination: Square, capture: bool
) -> str:
    """Origin file and/or rank needed to tell *origin* apart from its rivals."""
    rivals = ambiguous_origins(state, origin, destination, capture)
    if not rivals:
        return ""
    shares_file = any(file_of(sq) == file_of(origin) for sq in rivals)
    shares_rank = any(rank_of(sq) == rank_of(origin) for sq in rivals)
    if not shares_file:
        return _file_char(origin)
    if not shares_rank:
        return str(rank_of(origin) + 1)
    return square_to_algebraic(origin)


# ── Rendering ────────────────────────────────────────────────────────────────


def action_to_san(state: GameState, action: Action) -> str:
    """Algebraic notation of a legal *action* in *state*.

    Promotions are written without ``=`` (``b8Q``) and no check suffix is
    appended.
    """
    if isinstance(action, Castle):
        return "O-O" if action.direction == CastleDirection.KINGSIDE else "O-O-O"

    origin, destination = _endpoints(state, action)
    piece = state[origin]
    assert piece is not None

    if isinstance(action, EnPassant):
        return f"{_file_char(origin)}x{square_to_algebraic(destination)}"

    if isinstance(action, Promotion):
        san = f"{_file_char(origin)}x" if action.is_capture else ""
        letter = Piece(piece.color, action.pawn_becomes).san_letter
        return san + square_to_algebraic(destination) + letter

    is_capture = isinstance(action, Capture)
    san = piece.san_letter
    if piece.name == PieceName.PAWN:
        if is_capture:
            san += _file_char(origin)
    else:
        san += disambiguation(state, origin, destination, is_capture)
    if is_capture:
        san += "x"
    return san + square_to_algebraic(destination)


# ── Parsing ──────────────────────────────────────────────────────────────────


def parse_pawn_move(text: str, state: GameState) -> Move | None:
    """Interpret a bare square such as ``"e4"`` as a pawn push to it.

    The pawn is looked for one rank behind the destination, then two ranks
    behind when the square in between is empty. Destinations on the last rank
    are promotions and yield None, as does any push that is not legal.
    """
    to_sq = algebraic_to_square(text)
    if to_sq is None:
        return None
    color = state.to_move
    forward = PAWN_DIRECTION[color]
    if rank_of(to_sq) == (7 if forward > 0 else 0):
        return None

    one_back = to_sq - 8 * forward
    two_back = to_sq - 16 * forward
    move: Move | None = None
    if is_valid_square(one_back) and state.piece_is(color, PieceName.PAWN, one_back):
        move = Move(one_back, to_sq)
    elif (
        is_valid_square(two_back)
        and state.is_empty(one_back)
        and state.piece_is(color, PieceName.PAWN, two_back)
    ):
        move = Move(two_back, to_sq)

    if move is None or not move.is_legal(state):
        return None
    return move


def parse_san(state: GameState, san: str) -> Action:
    """Parse a single algebraic move into the legal :data:`Action` it names."""
    legal = legal_actions(state)

    clean = san.strip().rstrip("+#!?").replace("=", "")
    if clean.endswith("e.p."):
        clean = clean[:-4].rstrip()

    # Castling
    if clean in ("O-O", "0-0", "O-O-O", "0-0-0"):
        direction = (
            CastleDirection.KINGSIDE if len(clean) == 3 else CastleDirection.QUEENSIDE
        )
        for action in legal:
            if isinstance(action, Castle) and action.direction == direction:
                return action
        raise ValueError(f"Illegal move: {san}")

    # Promotion
    promotion: PieceName | None = None
    if len(clean) >= 3 and clean[-1] in _SAN_PIECE_REV and clean[-2].isdigit():
        promotion = _SAN_PIECE_REV[clean[-1]]
        clean = clean[:-1]

    # Destination (last two chars)
    to_sq = parse_square(clean[-2:])
    clean = clean[:-2]

    # Capture marker
    if clean.endswith("x"):
        clean = clean[:-1]

    # Piece kind
    if clean and clean[0] in _SAN_PIECE_REV:
        piece_name = _SAN_PIECE_REV[clean[0]]
        clean = clean[1:]
    else:
        piece_name = PieceName.PAWN

    # Disambiguation
    from_file: int | None = None
    from_rank: int | None = None
    for ch in clean:
        if ch in "abcdefgh":
            from_file = ord(ch) - ord("a")
        elif ch in "12345678":
            from_rank = int(ch) - 1
        else:
            raise ValueError(f"Invalid move text: {san!r}")

    candidates: list[Action] = []
    for action in legal:
        if isinstance(action, Castle):
            continue
        origin, destination = _endpoints(state, action)
        piece = state[origin]
        if piece is None or piece.name != piece_name or destination != to_sq:
            continue
        action_promotion = action.pawn_becomes if isinstance(action, Promotion) else None
        if action_promotion != promotion:
            continue
        if from_file is not None and file_of(origin) != from_file:
            continue
        if from_rank is not None and rank_of(origin) != from_rank:
            continue
        candidates.append(action)

    if len(candidates) == 1:
        return candidates[0]
    if not candidates:
        raise ValueError(f"Illegal move: {san}")
    raise ValueError(f"Ambiguous move: {san} → {candidates}")
