"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessrules.core import GameState, position_from_fen

KIWIPETE = "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1"


@pytest.fixture
def start_state() -> GameState:
    return GameState.new()


@pytest.fixture
def kiwipete() -> GameState:
    """Middlegame rich in castling, en-passant and promotion edge cases."""
    return position_from_fen(KIWIPETE)


@pytest.fixture
def castle_ready() -> GameState:
    """Both sides may castle either way; only kings and rooks on the board."""
    return position_from_fen("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
