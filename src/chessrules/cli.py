"""Command-line driver: show a position and everything that can happen next."""

from __future__ import annotations

import argparse
import logging

from chessrules.core import (
    GameState,
    Rules,
    legal_actions,
    position_from_fen,
    position_to_fen,
)

_LOGGER = logging.getLogger(__name__)


def _status(state: GameState) -> str:
    if Rules.is_checkmate(state):
        return "checkmate"
    if Rules.is_stalemate(state):
        return "stalemate"
    if Rules.is_in_check(state):
        return "check"
    return "in progress"


def cmd_show(args: argparse.Namespace) -> int:
    state = position_from_fen(args.fen) if args.fen else GameState.new()
    _LOGGER.debug("Showing %s", position_to_fen(state))

    print(state, end="")
    print("FEN:", position_to_fen(state))
    print("To move:", state.to_move)

    actions = legal_actions(state)
    print(f"Legal actions ({len(actions)}):")
    for action in actions:
        print(" ", action.as_algebraic_notation(state))
        if args.next_states:
            print("   ", position_to_fen(action.apply(state)))

    white, black = Rules.relative_material_values(state)
    print(f"Material: white {white}, black {black}")
    print("Status:", _status(state))
    return 0


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="chessrules")
    ap.add_argument("--fen", type=str, default=None, help="position to show")
    ap.add_argument(
        "--next-states",
        action="store_true",
        help="print the FEN reached by each legal action",
    )
    ap.add_argument("--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return cmd_show(args)
    except ValueError as exc:
        _LOGGER.debug("Rejected input", exc_info=True)
        print(f"error: {exc}")
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
