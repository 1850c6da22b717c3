"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from chesser.core import (
        Board, Color, GameState, derive_state, execute, is_legal, parse_square,
    )

    board, state = Board.initial(), GameState()
    e2, e4 = parse_square("e2"), parse_square("e4")
    if is_legal(board, e2, e4, Color.WHITE, state):
        board, state = execute(board, e2, e4, state), derive_state(state, board, e2, e4)
"""

from chesser.core.attacks import attacks, is_in_check, is_path_clear, is_square_attacked
from chesser.core.board import Board
from chesser.core.enums import Color, GameStatus, MoveFlag, PieceType
from chesser.core.execution import classify_move, derive_state, execute
from chesser.core.legality import can_castle, has_any_legal_move, is_legal, legal_moves
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
from chesser.core.rules import Rules, is_checkmate, is_stalemate
from chesser.core.state import GameState
from chesser.core.types import (
    ALL_SQUARES,
    Square,
    is_valid_square,
    parse_square,
    square_name,
)

__all__ = [
    # Enums / flags
    "Color",
    "GameStatus",
    "MoveFlag",
    "PieceType",
    # Types / helpers
    "ALL_SQUARES",
    "Square",
    "is_valid_square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "GameState",
    "Move",
    "Piece",
    "Rules",
    # Legality / attacks
    "attacks",
    "can_castle",
    "has_any_legal_move",
    "is_in_check",
    "is_legal",
    "is_path_clear",
    "is_square_attacked",
    "legal_moves",
    # Execution
    "classify_move",
    "derive_state",
    "execute",
    # Terminal detection
    "is_checkmate",
    "is_stalemate",
    # Notation
    "STARTING_FEN",
    "PositionRecord",
    "board_from_fen",
    "board_to_fen",
    "position_from_fen",
    "position_to_fen",
]
