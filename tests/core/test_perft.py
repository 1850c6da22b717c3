"""Perft node counts against well-known reference positions.

Promotion is always to a queen, so only positions without promotions at
the tested depth are used.
"""

import pytest

from chesser.core.board import Board
from chesser.core.enums import Color
from chesser.core.execution import derive_state, execute
from chesser.core.legality import legal_moves
from chesser.core.notation import STARTING_FEN, position_from_fen
from chesser.core.state import GameState

KIWIPETE = "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1"
ENDGAME = "8/2p5/3p4/KP5r/1R3p1k/8/4P1P1/8 w - - 0 1"


def perft(board: Board, side: Color, state: GameState, depth: int) -> int:
    if depth == 0:
        return 1
    nodes = 0
    for from_sq, _ in list(board.occupied(side)):
        for to_sq in legal_moves(board, from_sq, state):
            child = execute(board, from_sq, to_sq, state)
            child_state = derive_state(state, board, from_sq, to_sq)
            nodes += perft(child, side.opposite, child_state, depth - 1)
    return nodes


def _perft(fen: str, depth: int) -> int:
    record = position_from_fen(fen)
    return perft(record.board, record.side_to_move, record.state, depth)


class TestPerft:
    @pytest.mark.parametrize(
        ("fen", "depth", "expected"),
        [
            (STARTING_FEN, 1, 20),
            (STARTING_FEN, 2, 400),
            (KIWIPETE, 1, 48),
            (ENDGAME, 1, 14),
            (ENDGAME, 2, 191),
        ],
    )
    def test_shallow(self, fen: str, depth: int, expected: int) -> None:
        assert _perft(fen, depth) == expected

    @pytest.mark.slow
    def test_start_depth_3(self) -> None:
        assert _perft(STARTING_FEN, 3) == 8902

    @pytest.mark.slow
    def test_kiwipete_depth_2(self) -> None:
        assert _perft(KIWIPETE, 2) == 2039
