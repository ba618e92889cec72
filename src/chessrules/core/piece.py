"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import Color, PieceName

# Lowercase letter per kind; FEN writes white in uppercase.
_LETTERS: dict[PieceName, str] = {
    PieceName.PAWN: "p",
    PieceName.KNIGHT: "n",
    PieceName.BISHOP: "b",
    PieceName.ROOK: "r",
    PieceName.QUEEN: "q",
    PieceName.KING: "k",
}
_NAMES_BY_LETTER: dict[str, PieceName] = {v: k for k, v in _LETTERS.items()}

# Offset from U+2654 (white king); black glyphs follow six code points later.
_GLYPH_OFFSETS: dict[PieceName, int] = {
    PieceName.KING: 0,
    PieceName.QUEEN: 1,
    PieceName.ROOK: 2,
    PieceName.BISHOP: 3,
    PieceName.KNIGHT: 4,
    PieceName.PAWN: 5,
}


@dataclass(frozen=True, slots=True)
class Piece:
    """A colored piece kind. Two pieces are equal when both fields match."""

    color: Color
    name: PieceName

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        letter = _LETTERS[self.name]
        return letter.upper() if self.color == Color.WHITE else letter

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        name = _NAMES_BY_LETTER.get(char.lower()) if len(char) == 1 else None
        if name is None:
            raise ValueError(f"Invalid piece character: {char!r}")
        return cls(Color.WHITE if char.isupper() else Color.BLACK, name)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return chr(0x2654 + 6 * self.color + _GLYPH_OFFSETS[self.name])

    @property
    def san_letter(self) -> str:
        """Algebraic-notation letter; pawns have none."""
        if self.name == PieceName.PAWN:
            return ""
        return _LETTERS[self.name].upper()
