"""GameState - one complete chess position as an immutable value."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass

from chessrules.core.enums import Color, PieceName
from chessrules.core.piece import Piece
from chessrules.core.types import Square, is_valid_square, make_square

_EMPTY_SQUARES: tuple[Piece | None, ...] = (None,) * 64

_BACK_RANK: tuple[PieceName, ...] = (
    PieceName.ROOK,
    PieceName.KNIGHT,
    PieceName.BISHOP,
    PieceName.QUEEN,
    PieceName.KING,
    PieceName.BISHOP,
    PieceName.KNIGHT,
    PieceName.ROOK,
)


@dataclass(frozen=True, slots=True)
class GameState:
    """Board placement, side to move, castling rights and en-passant target.

    Instances are never mutated: every action produces a fresh copy, so a
    state may be shared freely between callers (and threads).
    """

    squares: tuple[Piece | None, ...] = _EMPTY_SQUARES
    to_move: Color = Color.WHITE
    white_can_castle_kingside: bool = False
    white_can_castle_queenside: bool = False
    black_can_castle_kingside: bool = False
    black_can_castle_queenside: bool = False
    en_passant_square: Square | None = None

    def __post_init__(self) -> None:
        if len(self.squares) != 64:
            raise ValueError(f"A board has 64 squares, got {len(self.squares)}")
        ep = self.en_passant_square
        if ep is not None and not is_valid_square(ep):
            raise ValueError(f"En-passant square out of range: {ep}")

    # -- Factories ----------------------------------------------------------

    @classmethod
    def empty(cls) -> GameState:
        """No pieces, white to move, no castling rights."""
        return cls()

    @classmethod
    def new(cls) -> GameState:
        """Standard starting position."""
        placements: dict[Square, Piece] = {}
        for f, name in enumerate(_BACK_RANK):
            placements[make_square(f, 0)] = Piece(Color.WHITE, name)
            placements[make_square(f, 1)] = Piece(Color.WHITE, PieceName.PAWN)
            placements[make_square(f, 6)] = Piece(Color.BLACK, PieceName.PAWN)
            placements[make_square(f, 7)] = Piece(Color.BLACK, name)
        return cls.with_placements(
            placements,
            white_can_castle_kingside=True,
            white_can_castle_queenside=True,
            black_can_castle_kingside=True,
            black_can_castle_queenside=True,
        )

    @classmethod
    def with_placements(
        cls,
        placements: Mapping[Square, Piece],
        *,
        to_move: Color = Color.WHITE,
        white_can_castle_kingside: bool = False,
        white_can_castle_queenside: bool = False,
        black_can_castle_kingside: bool = False,
        black_can_castle_queenside: bool = False,
        en_passant_square: Square | None = None,
    ) -> GameState:
        """Otherwise empty board holding *placements* (square → piece)."""
        squares: list[Piece | None] = [None] * 64
        for sq, piece in placements.items():
            if not is_valid_square(sq):
                raise ValueError(f"Square index out of range: {sq}")
            squares[sq] = piece
        return cls(
            squares=tuple(squares),
            to_move=to_move,
            white_can_castle_kingside=white_can_castle_kingside,
            white_can_castle_queenside=white_can_castle_queenside,
            black_can_castle_kingside=black_can_castle_kingside,
            black_can_castle_queenside=black_can_castle_queenside,
            en_passant_square=en_passant_square,
        )

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self.squares[sq]

    def is_empty(self, sq: Square) -> bool:
        return self.squares[sq] is None

    def piece_is(self, color: Color, name: PieceName, sq: Square) -> bool:
        """Whether *sq* holds *color*'s *name*."""
        piece = self.squares[sq]
        return piece is not None and piece.color == color and piece.name == name

    # -- Query helpers ------------------------------------------------------

    def occupied_squares(self, color: Color) -> Iterator[Square]:
        """Squares holding a piece of *color*, a1 first."""
        for sq, piece in enumerate(self.squares):
            if piece is not None and piece.color == color:
                yield sq

    def king_square(self, color: Color) -> Square | None:
        """Square of *color*'s king, or None when the board has none."""
        for sq in self.occupied_squares(color):
            if self.squares[sq].name == PieceName.KING:  # type: ignore[union-attr]
                return sq
        return None

    # -- Dunder helpers -----------------------------------------------------

    def __str__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = ""
            for file in range(8):
                p = self.squares[make_square(file, rank)]
                row += (str(p) if p else ".") + " "
            rows.append(row)
        return "\n".join(rows) + "\n"
