"""Tests for FEN handling and the small value types."""

import pytest

from chesser.core.board import Board
from chesser.core.enums import Color, PieceType
from chesser.core.move import Move
from chesser.core.notation import (
    STARTING_FEN,
    PositionRecord,
    board_from_fen,
    board_to_fen,
    position_from_fen,
    position_to_fen,
)
from chesser.core.piece import Piece
from chesser.core.state import GameState
from chesser.core.types import Square, is_valid_square, parse_square, square_name

KIWIPETE = "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1"
AFTER_E4 = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"


class TestFenParsing:
    def test_starting_position(self, start: PositionRecord) -> None:
        assert start.board == Board.initial()
        assert start.side_to_move == Color.WHITE
        assert start.state == GameState()

    def test_en_passant_target(self) -> None:
        pos = position_from_fen(AFTER_E4)
        assert pos.side_to_move == Color.BLACK
        assert pos.state.en_passant_target == Square(5, 4)

    def test_no_castling(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/4K3 w - - 0 1")
        assert pos.state.king_moved == {Color.WHITE, Color.BLACK}
        assert pos.state.rook_moved == frozenset()

    def test_partial_castling(self) -> None:
        pos = position_from_fen("r3k2r/8/8/8/8/8/8/R3K2R w Kq - 0 1")
        assert pos.state.king_moved == frozenset()
        assert pos.state.rook_moved == {(Color.WHITE, 0), (Color.BLACK, 7)}

    def test_clocks_are_optional(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/4K3 b - -")
        assert pos.state.halfmove_clock == 0
        assert pos.state.fullmove_number == 1

    def test_clock_values(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/4K3 w - - 17 42")
        assert pos.state.halfmove_clock == 17
        assert pos.state.fullmove_number == 42

    @pytest.mark.parametrize(
        "fen",
        [
            "8/8/8 w - - 0 1",
            "4k3/8/8/8/8/8/8/4K3 x - - 0 1",
            "4k3/8/8/8/8/8/8/4K3 w KX - 0 1",
            "4k3/8/8/8/8/8/8/4K3 w KK - 0 1",
            "4k3/8/8/8/8/8/8/4K3 b - e6 0 1",
            "4k3/8/8/8/8/8/8/4K3 w - z9 0 1",
            "4k3/8/8/8/8/8/8/4K3 w - - a 1",
            "4k3/8/8/8/8/8/8/4K3 w - - -1 1",
            "4k3/8/8/8/8/8/8/4K3 w - - 0 0",
            "4k3/8/8/8/8/8/8/4K3 w",
            "4k3/8/8/8/8/8/8/4X3 w - - 0 1",
            "4k3/8/8/8/8/8/8/9 w - - 0 1",
            "4k3/8/8/8/8/8/8/ppppppppp w - - 0 1",
            "4k3/8/8/8/8/8/8/4K2 w - - 0 1",
        ],
    )
    def test_rejects_malformed(self, fen: str) -> None:
        with pytest.raises(ValueError):
            position_from_fen(fen)


class TestFenSerialisation:
    @pytest.mark.parametrize(
        "fen",
        [
            STARTING_FEN,
            KIWIPETE,
            AFTER_E4,
            "r3k2r/8/8/8/8/8/8/R3K2R w Kq - 0 1",
            "4k3/8/8/8/8/8/8/4K3 w - - 12 30",
        ],
    )
    def test_round_trip(self, fen: str) -> None:
        assert position_to_fen(position_from_fen(fen)) == fen

    def test_board_placement(self) -> None:
        assert board_to_fen(Board.initial()) == STARTING_FEN.split()[0]
        assert board_to_fen(Board.empty()) == "8/8/8/8/8/8/8/8"
        assert board_from_fen("8/8/8/8/8/8/8/8") == Board.empty()

    def test_moved_king_drops_both_letters(self, castling: PositionRecord) -> None:
        state = GameState(king_moved=frozenset({Color.BLACK}))
        record = PositionRecord(castling.board, Color.WHITE, state)
        assert position_to_fen(record).split()[2] == "KQ"


class TestPiece:
    def test_fen_chars(self) -> None:
        assert Piece.from_char("N") == Piece(Color.WHITE, PieceType.KNIGHT)
        assert Piece.from_char("q") == Piece(Color.BLACK, PieceType.QUEEN)
        assert str(Piece(Color.WHITE, PieceType.KING)) == "K"
        assert str(Piece(Color.BLACK, PieceType.PAWN)) == "p"

    @pytest.mark.parametrize("char", ["x", "", "Kk", "1"])
    def test_bad_char(self, char: str) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char(char)

    def test_symbols(self) -> None:
        assert Piece(Color.WHITE, PieceType.KING).symbol == "♔"
        assert Piece(Color.BLACK, PieceType.KING).symbol == "♚"
        assert Piece(Color.BLACK, PieceType.KNIGHT).symbol == "♞"
        assert Piece(Color.WHITE, PieceType.PAWN).symbol == "♙"

    def test_is_a(self) -> None:
        piece = Piece(Color.WHITE, PieceType.ROOK)
        assert piece.is_a(Color.WHITE, PieceType.ROOK)
        assert not piece.is_a(Color.BLACK, PieceType.ROOK)


class TestSquares:
    def test_names(self) -> None:
        assert square_name((6, 4)) == "e2"
        assert square_name((0, 0)) == "a8"
        assert str(Square(7, 7)) == "h1"

    def test_parse(self) -> None:
        assert parse_square("a8") == (0, 0)
        assert parse_square("h1") == Square(7, 7)

    @pytest.mark.parametrize("name", ["i1", "a9", "a0", "e", "e22", ""])
    def test_parse_rejects(self, name: str) -> None:
        with pytest.raises(ValueError, match="Invalid square name"):
            parse_square(name)

    def test_validity(self) -> None:
        assert is_valid_square((0, 0))
        assert is_valid_square((7, 7))
        assert not is_valid_square((8, 0))
        assert not is_valid_square((0, -1))


class TestMove:
    def test_str(self) -> None:
        assert str(Move(parse_square("e2"), parse_square("e4"))) == "e2e4"

    def test_identifier(self) -> None:
        move = Move(parse_square("g1"), parse_square("f3"))
        assert move.identifier(Piece(Color.WHITE, PieceType.KNIGHT)) == "knightg1f3"
        pawn = Move(parse_square("e2"), parse_square("e4"))
        assert pawn.identifier(Piece(Color.WHITE, PieceType.PAWN)) == "pawne2e4"
