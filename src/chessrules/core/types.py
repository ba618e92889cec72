"""Square type alias and coordinate helpers.

Board layout (Little-Endian Rank-File mapping):
    a1=0, b1=1, ..., h1=7
    a2=8, b2=9, ..., h2=15
    ...
    a8=56, b8=57, ..., h8=63
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = int  # 0–63

_FILES = "abcdefgh"
_RANKS = "12345678"


def file_of(sq: Square) -> int:
    """File index 0–7 (a–h)."""
    return sq % 8


def rank_of(sq: Square) -> int:
    """Rank index 0–7 (1–8)."""
    return sq // 8


def make_square(file: int, rank: int) -> Square:
    """Create square from file (0–7) and rank (0–7)."""
    return rank * 8 + file


def is_valid_square(sq: int) -> bool:
    """Check whether integer is a valid square index."""
    return 0 <= sq < 64


def square_to_algebraic(sq: Square) -> str:
    """Human-readable name, e.g. 0 → 'a1', 63 → 'h8'."""
    return _FILES[file_of(sq)] + _RANKS[rank_of(sq)]


def algebraic_to_square(name: str) -> Square | None:
    """Square index for *name*, e.g. 'e4' → 28, or None if malformed."""
    if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
        return None
    return make_square(_FILES.index(name[0]), _RANKS.index(name[1]))


def parse_square(name: str) -> Square:
    """Parse square name, raising ValueError when it is not one."""
    sq = algebraic_to_square(name)
    if sq is None:
        raise ValueError(f"Invalid square name: {name!r}")
    return sq


# ── Back-rank squares ───────────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = range(0, 8)
A8, B8, C8, D8, E8, F8, G8, H8 = range(56, 64)
