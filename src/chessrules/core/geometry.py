"""Square-index arithmetic shared by the piece rules.

None of these helpers validate their inputs: callers pass squares in 0–63.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.types import Square, file_of, rank_of

if TYPE_CHECKING:
    from chessrules.core.state import GameState


def position_delta(origin: Square, destination: Square) -> tuple[int, int]:
    """File and rank displacement from *origin* to *destination*."""
    return (
        file_of(destination) - file_of(origin),
        rank_of(destination) - rank_of(origin),
    )


def movement_is_vertical(origin: Square, destination: Square) -> bool:
    return file_of(origin) == file_of(destination)


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


def _path_is_obstructed(origin: Square, step: int, count: int, state: GameState) -> bool:
    squares = state.squares
    sq = origin
    for _ in range(count):
        sq += step
        if squares[sq] is not None:
            return True
    return False


def horizontal_path_is_obstructed(origin: Square, dx: int, state: GameState) -> bool:
    """Any piece strictly between *origin* and *origin* + dx on the same rank."""
    return _path_is_obstructed(origin, _sign(dx), abs(dx) - 1, state)


def vertical_path_is_obstructed(origin: Square, dy: int, state: GameState) -> bool:
    """Any piece strictly between *origin* and *origin* + 8·dy on the same file."""
    return _path_is_obstructed(origin, 8 * _sign(dy), abs(dy) - 1, state)


def diagonal_path_is_obstructed(
    origin: Square, destination: Square, state: GameState
) -> bool:
    """Any piece strictly between two squares on a shared diagonal.

    Steps are ±9 along the a1-h8 direction and ±7 along a8-h1.
    """
    dx, dy = position_delta(origin, destination)
    step = 8 * _sign(dy) + _sign(dx)
    return _path_is_obstructed(origin, step, abs(dx) - 1, state)
