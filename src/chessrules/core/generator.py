"""Legal-action enumeration.

Every generator proposes candidates by brute force and keeps those whose
``is_legal`` holds, so enumeration and legality can never disagree.
"""

from __future__ import annotations

import logging

from chessrules.core.actions import (
    PROMOTION_TARGETS,
    Action,
    Capture,
    Castle,
    EnPassant,
    Move,
    Promotion,
)
from chessrules.core.enums import CastleDirection, Color, PieceName
from chessrules.core.state import GameState
from chessrules.core.types import is_valid_square, rank_of

_LOGGER = logging.getLogger(__name__)

_PROMOTION_ORIGINS: dict[Color, range] = {
    Color.WHITE: range(48, 56),
    Color.BLACK: range(8, 16),
}


def legal_moves(state: GameState) -> list[Move]:
    """All legal non-capturing relocations for the side to move."""
    results: list[Move] = []
    for from_sq in state.occupied_squares(state.to_move):
        for to_sq in range(64):
            action = Move(from_sq, to_sq)
            if action.is_legal(state):
                results.append(action)
    return results


def legal_captures(state: GameState) -> list[Capture]:
    """All legal ordinary captures for the side to move."""
    results: list[Capture] = []
    for with_sq in state.occupied_squares(state.to_move):
        for on_sq in range(64):
            action = Capture(with_sq, on_sq)
            if action.is_legal(state):
                results.append(action)
    return results


def legal_en_passants(state: GameState) -> list[EnPassant]:
    """En-passant captures onto the current target, at most two."""
    results: list[EnPassant] = []
    target = state.en_passant_square
    if target is None:
        return results
    for offset in (-9, -7, 7, 9):
        with_sq = target + offset
        if not is_valid_square(with_sq):
            continue
        action = EnPassant(with_sq)
        if action.is_legal(state):
            results.append(action)
    return results


def legal_castles(state: GameState) -> list[Castle]:
    results: list[Castle] = []
    for direction in (CastleDirection.KINGSIDE, CastleDirection.QUEENSIDE):
        action = Castle(direction)
        if action.is_legal(state):
            results.append(action)
    return results


def legal_promotions(state: GameState) -> list[Promotion]:
    """Straight and capturing promotions, one per target piece kind."""
    results: list[Promotion] = []
    color = state.to_move
    forward = 8 if color == Color.WHITE else -8
    for from_sq in _PROMOTION_ORIGINS[color]:
        if not state.piece_is(color, PieceName.PAWN, from_sq):
            continue
        ahead = from_sq + forward
        for to_sq in (ahead - 1, ahead, ahead + 1):
            if rank_of(to_sq) != rank_of(ahead):
                continue
            for target in PROMOTION_TARGETS:
                action = Promotion(from_sq, to_sq, target)
                if action.is_legal(state):
                    results.append(action)
    return results


def legal_actions(state: GameState) -> list[Action]:
    """Every legal action for the side to move."""
    actions: list[Action] = [
        *legal_moves(state),
        *legal_captures(state),
        *legal_en_passants(state),
        *legal_castles(state),
        *legal_promotions(state),
    ]
    _LOGGER.debug("%d legal actions for %s", len(actions), state.to_move)
    return actions


def legal_next_states(state: GameState) -> list[GameState]:
    """The position after each legal action, in :func:`legal_actions` order."""
    return [action.apply(state) for action in legal_actions(state)]
