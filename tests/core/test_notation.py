"""Tests for FEN, algebraic rendering and algebraic parsing."""

import pytest

from chessrules.core.actions import Capture, Castle, EnPassant, Move, Promotion
from chessrules.core.enums import CastleDirection, Color, PieceName
from chessrules.core.generator import legal_actions
from chessrules.core.notation import (
    STARTING_FEN,
    action_to_san,
    parse_pawn_move,
    parse_san,
    position_from_fen,
    position_to_fen,
)
from chessrules.core.piece import Piece
from chessrules.core.state import GameState
from chessrules.core.types import E1, E8, parse_square


def _board(chars: dict[int, str], to_move: Color = Color.WHITE) -> GameState:
    return GameState.with_placements(
        {sq: Piece.from_char(ch) for sq, ch in chars.items()}, to_move=to_move
    )


class TestFenParsing:
    def test_starting_position(self, start_state: GameState) -> None:
        assert position_from_fen(STARTING_FEN) == start_state

    def test_starting_kings(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert pos[E1] == Piece(Color.WHITE, PieceName.KING)
        assert pos[E8] == Piece(Color.BLACK, PieceName.KING)

    def test_en_passant_square(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        pos = position_from_fen(fen)
        assert pos.en_passant_square == parse_square("e3")
        assert pos.to_move == Color.BLACK

    def test_partial_castling(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w Kq - 0 1"
        pos = position_from_fen(fen)
        assert pos.white_can_castle_kingside
        assert not pos.white_can_castle_queenside
        assert not pos.black_can_castle_kingside
        assert pos.black_can_castle_queenside

    def test_clocks_optional(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/4K3 w - -")
        assert pos.king_square(Color.WHITE) == E1

    @pytest.mark.parametrize(
        "fen",
        [
            "not a fen",
            "8/8/8/8/8/8/8 w - - 0 1",
            "9/8/8/8/8/8/8/8 w - - 0 1",
            "ppppppppp/8/8/8/8/8/8/8 w - - 0 1",
            "7/8/8/8/8/8/8/8 w - - 0 1",
            "x7/8/8/8/8/8/8/8 w - - 0 1",
            "8/8/8/8/8/8/8/8 x - - 0 1",
            "8/8/8/8/8/8/8/8 w KX - 0 1",
            "8/8/8/8/8/8/8/8 w KK - 0 1",
            "8/8/8/8/8/8/8/8 w - e3 0 1",
            "8/8/8/8/8/8/8/8 w - z9 0 1",
            "8/8/8/8/8/8/8/8 w - - a 1",
            "8/8/8/8/8/8/8/8 w - - 0 0",
        ],
    )
    def test_invalid_fen_raises(self, fen: str) -> None:
        with pytest.raises(ValueError):
            position_from_fen(fen)


class TestFenSerialisation:
    def test_roundtrip_starting(self, start_state: GameState) -> None:
        assert position_to_fen(start_state) == STARTING_FEN

    def test_after_double_push(self, start_state: GameState) -> None:
        after = Move(parse_square("e2"), parse_square("e4")).apply(start_state)
        assert (
            position_to_fen(after)
            == "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        )

    def test_roundtrip_custom(self, kiwipete: GameState) -> None:
        fen = "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1"
        assert position_to_fen(kiwipete) == fen

    def test_clocks_are_not_kept(self) -> None:
        pos = position_from_fen("8/8/4k3/8/8/4K3/8/8 b - - 12 40")
        assert position_to_fen(pos) == "8/8/4k3/8/8/4K3/8/8 b - - 0 1"


class TestRendering:
    def test_pawn_push(self, start_state: GameState) -> None:
        assert action_to_san(start_state, Move(12, 28)) == "e4"

    def test_king_move(self) -> None:
        state = _board({7: "K", 60: "k"})
        assert action_to_san(state, Move(7, 6)) == "Kg1"

    def test_disambiguate_by_file(self) -> None:
        state = _board({7: "K", 19: "B", 21: "B", 60: "k"})
        assert Move(19, 28).as_algebraic_notation(state) == "Bde4"

    def test_disambiguate_by_rank(self) -> None:
        state = _board({7: "K", 19: "B", 35: "B", 60: "k"})
        assert Move(19, 28).as_algebraic_notation(state) == "B3e4"

    def test_disambiguate_by_square(self) -> None:
        state = _board({7: "K", 19: "B", 21: "B", 35: "B", 60: "k"})
        assert Move(19, 28).as_algebraic_notation(state) == "Bd3e4"

    def test_rival_on_other_file_and_rank_uses_file(self) -> None:
        state = position_from_fen("7k/8/8/8/8/8/R7/4R2K w - - 0 1")
        move = Move(parse_square("e1"), parse_square("e2"))
        assert move.as_algebraic_notation(state) == "Ree2"

    def test_pinned_rival_needs_no_prefix(self) -> None:
        state = position_from_fen("4r2k/8/8/4N3/8/8/8/2N1K3 w - - 0 1")
        move = Move(parse_square("c1"), parse_square("d3"))
        assert move.as_algebraic_notation(state) == "Nd3"

    def test_pawn_capture(self) -> None:
        state = _board({7: "K", 35: "B", 44: "p", 60: "k"}, to_move=Color.BLACK)
        assert Capture(44, 35).as_algebraic_notation(state) == "exd5"

    @pytest.mark.parametrize(
        ("attacker", "origin", "target", "expected"),
        [
            ("b", 42, 35, "Bxd5"),
            ("n", 25, 35, "Nxd5"),
            ("r", 32, 35, "Rxd5"),
            ("q", 56, 35, "Qxd5"),
        ],
    )
    def test_piece_captures(
        self, attacker: str, origin: int, target: int, expected: str
    ) -> None:
        state = _board({7: "K", target: "B", origin: attacker, 60: "k"}, Color.BLACK)
        assert Capture(origin, target).as_algebraic_notation(state) == expected

    def test_king_capture(self) -> None:
        state = _board({7: "K", 20: "P", 21: "k"}, to_move=Color.BLACK)
        assert Capture(21, 20).as_algebraic_notation(state) == "Kxe3"

    def test_capture_disambiguate_by_file(self) -> None:
        state = _board({7: "K", 35: "B", 32: "r", 38: "r", 60: "k"}, Color.BLACK)
        assert Capture(32, 35).as_algebraic_notation(state) == "Raxd5"

    def test_capture_disambiguate_by_rank(self) -> None:
        state = _board({7: "K", 35: "B", 43: "q", 27: "q", 60: "k"}, Color.BLACK)
        assert Capture(27, 35).as_algebraic_notation(state) == "Q4xd5"

    def test_en_passant(self) -> None:
        state = position_from_fen("4k3/8/8/1Pp5/8/8/8/4K3 w - c6 0 1")
        assert EnPassant(33).as_algebraic_notation(state) == "bxc6"

    def test_castles(self, castle_ready: GameState) -> None:
        assert action_to_san(castle_ready, Castle(CastleDirection.KINGSIDE)) == "O-O"
        assert action_to_san(castle_ready, Castle(CastleDirection.QUEENSIDE)) == "O-O-O"

    @pytest.mark.parametrize(
        ("chars", "to_move", "action", "expected"),
        [
            ({55: "P"}, Color.WHITE, Promotion(55, 63, PieceName.BISHOP), "h8B"),
            ({54: "P"}, Color.WHITE, Promotion(54, 62, PieceName.KNIGHT), "g8N"),
            ({9: "p"}, Color.BLACK, Promotion(9, 1, PieceName.ROOK), "b1R"),
            ({11: "p", 2: "R"}, Color.BLACK, Promotion(11, 2, PieceName.QUEEN), "dxc1Q"),
        ],
    )
    def test_promotions(
        self,
        chars: dict[int, str],
        to_move: Color,
        action: Promotion,
        expected: str,
    ) -> None:
        state = _board(chars, to_move)
        assert action.as_algebraic_notation(state) == expected


class TestParseSan:
    def test_pawn_push(self, start_state: GameState) -> None:
        assert parse_san(start_state, "e4") == Move(12, 28)

    def test_knight(self, start_state: GameState) -> None:
        assert parse_san(start_state, "Nf3") == Move(6, 21)

    def test_illegal_raises(self, start_state: GameState) -> None:
        with pytest.raises(ValueError, match="Illegal"):
            parse_san(start_state, "Ke5")

    def test_garbage_raises(self, start_state: GameState) -> None:
        with pytest.raises(ValueError):
            parse_san(start_state, "Nzz")

    def test_castling_spellings(self, castle_ready: GameState) -> None:
        kingside = Castle(CastleDirection.KINGSIDE)
        queenside = Castle(CastleDirection.QUEENSIDE)
        assert parse_san(castle_ready, "O-O") == kingside
        assert parse_san(castle_ready, "0-0") == kingside
        assert parse_san(castle_ready, "O-O-O+") == queenside
        assert parse_san(castle_ready, "0-0-0") == queenside

    def test_castling_without_right(self, start_state: GameState) -> None:
        with pytest.raises(ValueError, match="Illegal"):
            parse_san(start_state, "O-O")

    def test_ambiguous_raises(self) -> None:
        pos = position_from_fen("7k/8/8/8/8/8/8/K1N3N1 w - - 0 1")
        with pytest.raises(ValueError, match="Ambiguous"):
            parse_san(pos, "Ne2")

    def test_file_and_rank_disambiguation(self) -> None:
        pos = position_from_fen("7k/8/8/8/8/8/8/K1N3N1 w - - 0 1")
        assert parse_san(pos, "Nce2") == Move(parse_square("c1"), parse_square("e2"))

        pos_rank = position_from_fen("7k/8/8/8/8/8/R7/4R2K w - - 0 1")
        assert parse_san(pos_rank, "R1e2") == Move(
            parse_square("e1"), parse_square("e2")
        )

    def test_promotion_with_suffixes(self) -> None:
        pos = position_from_fen("7k/6P1/8/8/8/8/8/4K3 w - - 0 1")
        assert parse_san(pos, "g8=Q+") == Promotion(54, 62, PieceName.QUEEN)
        assert parse_san(pos, "g8N") == Promotion(54, 62, PieceName.KNIGHT)

    def test_promotion_piece_required(self) -> None:
        pos = position_from_fen("7k/6P1/8/8/8/8/8/4K3 w - - 0 1")
        with pytest.raises(ValueError, match="Illegal"):
            parse_san(pos, "g8")

    def test_en_passant(self) -> None:
        pos = position_from_fen("4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 1")
        assert parse_san(pos, "exd6") == EnPassant(parse_square("e5"))
        assert parse_san(pos, "exd6 e.p.") == EnPassant(parse_square("e5"))

    @pytest.mark.parametrize(
        "fen",
        [
            STARTING_FEN,
            "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1",
            "rnbq1k1r/pp1Pbppp/2p5/8/2B5/8/PPP1NnPP/RNBQK2R w KQ - 1 8",
        ],
    )
    def test_roundtrip(self, fen: str) -> None:
        pos = position_from_fen(fen)
        for action in legal_actions(pos):
            san = action_to_san(pos, action)
            assert parse_san(pos, san) == action, san


class TestParsePawnMove:
    def test_single_and_double(self, start_state: GameState) -> None:
        assert parse_pawn_move("e3", start_state) == Move(12, 20)
        assert parse_pawn_move("e4", start_state) == Move(12, 28)
        assert parse_pawn_move("e5", start_state) is None

    def test_black(self) -> None:
        state = position_from_fen(
            "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        )
        assert parse_pawn_move("d5", state) == Move(51, 35)
        assert parse_pawn_move("d6", state) == Move(51, 43)

    def test_blocked_double_push(self) -> None:
        state = position_from_fen("4k3/8/8/8/8/4n3/4P3/4K3 w - - 0 1")
        assert parse_pawn_move("e4", state) is None

    def test_last_rank_is_left_to_promotion(self) -> None:
        state = position_from_fen("4k3/1P6/8/8/8/8/8/4K3 w - - 0 1")
        assert parse_pawn_move("b8", state) is None

    @pytest.mark.parametrize("text", ["", "e", "e9", "xe4", "E4"])
    def test_malformed(self, start_state: GameState, text: str) -> None:
        assert parse_pawn_move(text, start_state) is None
