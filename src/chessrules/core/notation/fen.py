"""FEN parsing and serialization.

Halfmove clock and fullmove number are not part of :class:`GameState`; they
are checked on the way in and written as ``0 1`` on the way out.
"""

from __future__ import annotations

from itertools import groupby

from chessrules.core.enums import Color
from chessrules.core.piece import Piece
from chessrules.core.state import GameState
from chessrules.core.types import (
    Square,
    make_square,
    parse_square,
    rank_of,
    square_to_algebraic,
)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_CASTLING_FIELDS: dict[str, str] = {
    "K": "white_can_castle_kingside",
    "Q": "white_can_castle_queenside",
    "k": "black_can_castle_kingside",
    "q": "black_can_castle_queenside",
}
_SIDES: dict[str, Color] = {"w": Color.WHITE, "b": Color.BLACK}
_EN_PASSANT_RANK: dict[Color, int] = {Color.WHITE: 5, Color.BLACK: 2}


def _read_placement(placement: str, fen: str) -> dict[Square, Piece]:
    rows = placement.split("/")
    if len(rows) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")

    pieces: dict[Square, Piece] = {}
    for rank, row in zip(range(7, -1, -1), rows):
        file = 0
        for ch in row:
            if file >= 8:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
            if ch.isdigit():
                if ch in "09":
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                file += int(ch)
                continue
            pieces[make_square(file, rank)] = Piece.from_char(ch)
            file += 1
        if file != 8:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")
    return pieces


def _read_castling(field: str) -> dict[str, bool]:
    if field == "-":
        return {}
    letters = set(field)
    if len(letters) != len(field) or not letters.issubset(_CASTLING_FIELDS):
        raise ValueError(f"Invalid FEN castling field: {field!r}")
    return {_CASTLING_FIELDS[ch]: True for ch in field}


def _read_en_passant(field: str, side: Color) -> Square | None:
    if field == "-":
        return None
    sq = parse_square(field)
    if rank_of(sq) != _EN_PASSANT_RANK[side]:
        raise ValueError(f"Invalid FEN en-passant square for side-to-move: {field!r}")
    return sq


def _check_clocks(clocks: list[str]) -> None:
    if clocks and not clocks[0].isdigit():
        raise ValueError(f"Invalid FEN halfmove clock: {clocks[0]!r}")
    if len(clocks) > 1 and (not clocks[1].isdigit() or int(clocks[1]) < 1):
        raise ValueError(f"Invalid FEN fullmove number: {clocks[1]!r}")


def position_from_fen(fen: str) -> GameState:
    """Parse a FEN string into a :class:`GameState`."""
    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise ValueError(f"Invalid FEN (need 4-6 fields): {fen!r}")

    placement, side_field, castling_field, ep_field = parts[:4]
    pieces = _read_placement(placement, fen)
    side = _SIDES.get(side_field)
    if side is None:
        raise ValueError(f"Invalid FEN side-to-move field: {side_field!r}")
    rights = _read_castling(castling_field)
    en_passant = _read_en_passant(ep_field, side)
    _check_clocks(parts[4:])

    return GameState.with_placements(
        pieces, to_move=side, en_passant_square=en_passant, **rights
    )


def _placement_row(state: GameState, rank: int) -> str:
    cells = [state[make_square(file, rank)] for file in range(8)]
    row = ""
    for is_gap, group in groupby(cells, key=lambda piece: piece is None):
        run = list(group)
        row += str(len(run)) if is_gap else "".join(map(str, run))
    return row


def position_to_fen(state: GameState) -> str:
    """Serialise a :class:`GameState` to FEN."""
    placement = "/".join(_placement_row(state, rank) for rank in range(7, -1, -1))
    side = next(key for key, color in _SIDES.items() if color == state.to_move)
    castling = "".join(
        ch for ch, right in _CASTLING_FIELDS.items() if getattr(state, right)
    )
    ep = state.en_passant_square
    return " ".join(
        (
            placement,
            side,
            castling or "-",
            "-" if ep is None else square_to_algebraic(ep),
            "0 1",
        )
    )
