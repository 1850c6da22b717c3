"""Move execution and post-move state derivation.

Both functions are pure: they read the board and state they are given
and return new values. Neither checks legality; callers confirm a move
with :func:`chesser.core.legality.is_legal` first.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from chesser.core.board import Board
from chesser.core.enums import Color, MoveFlag, PieceType
from chesser.core.piece import Piece
from chesser.core.state import GameState
from chesser.core.types import Square

_LOGGER = logging.getLogger(__name__)

# Castling side -> (rook home column, rook destination column)
ROOK_CASTLING_COLUMNS: dict[MoveFlag, tuple[int, int]] = {
    MoveFlag.CASTLE_KINGSIDE: (7, 5),
    MoveFlag.CASTLE_QUEENSIDE: (0, 3),
}
PROMOTION_ROWS: tuple[int, int] = (0, 7)


def classify_move(
    board: Board, from_sq: Square, to_sq: Square, state: GameState
) -> MoveFlag:
    """Special-move flag for the piece on *from_sq* moving to *to_sq*."""
    piece = board.get(from_sq)
    if piece is None:
        return MoveFlag.NORMAL

    row_diff = to_sq[0] - from_sq[0]
    col_diff = to_sq[1] - from_sq[1]

    if piece.piece_type == PieceType.KING and abs(col_diff) == 2:
        return MoveFlag.CASTLE_KINGSIDE if col_diff > 0 else MoveFlag.CASTLE_QUEENSIDE

    if piece.piece_type != PieceType.PAWN:
        return MoveFlag.NORMAL
    if (
        abs(col_diff) == 1
        and board.get(to_sq) is None
        and to_sq == state.en_passant_target
    ):
        return MoveFlag.EN_PASSANT
    if to_sq[0] in PROMOTION_ROWS:
        return MoveFlag.PROMOTION
    if abs(row_diff) == 2:
        return MoveFlag.DOUBLE_PAWN
    return MoveFlag.NORMAL


def execute(board: Board, from_sq: Square, to_sq: Square, state: GameState) -> Board:
    """Board after moving the piece on *from_sq* to *to_sq*.

    Handles en-passant removal, the castling rook slide and automatic
    promotion to a queen. Anything on *to_sq* is overwritten. With no
    piece on *from_sq* the board is returned unchanged.
    """
    piece = board.get(from_sq)
    if piece is None:
        _LOGGER.debug("execute: no piece on %s, board unchanged", from_sq)
        return board

    flag = classify_move(board, from_sq, to_sq, state)
    changes: dict[Square, Piece | None] = {}

    if flag == MoveFlag.EN_PASSANT:
        # The captured pawn stands beside the origin, not on the target.
        changes[(from_sq[0], to_sq[1])] = None

    elif flag in ROOK_CASTLING_COLUMNS:
        rook_from_col, rook_to_col = ROOK_CASTLING_COLUMNS[flag]
        row = from_sq[0]
        rook = board.get((row, rook_from_col))
        if rook is not None:
            changes[(row, rook_to_col)] = rook
            changes[(row, rook_from_col)] = None

    placed = piece
    if flag == MoveFlag.PROMOTION:
        placed = Piece(piece.color, PieceType.QUEEN)

    changes[from_sq] = None
    changes[to_sq] = placed
    return board.updated(changes)


def derive_state(
    prev_state: GameState, board: Board, from_sq: Square, to_sq: Square
) -> GameState:
    """State after the move, derived from the *pre-move* board."""
    piece = board.get(from_sq)
    if piece is None:
        _LOGGER.debug("derive_state: no piece on %s, state unchanged", from_sq)
        return prev_state

    en_passant_target: Square | None = None
    if piece.piece_type == PieceType.PAWN and abs(to_sq[0] - from_sq[0]) == 2:
        en_passant_target = Square((from_sq[0] + to_sq[0]) // 2, from_sq[1])

    king_moved = prev_state.king_moved
    if piece.piece_type == PieceType.KING:
        king_moved = king_moved | {piece.color}

    rook_moved = prev_state.rook_moved
    if piece.piece_type == PieceType.ROOK:
        rook_moved = rook_moved | {(piece.color, from_sq[1])}

    if piece.piece_type == PieceType.PAWN or board.get(to_sq) is not None:
        halfmove_clock = 0
    else:
        halfmove_clock = prev_state.halfmove_clock + 1

    fullmove_number = prev_state.fullmove_number
    if piece.color == Color.BLACK:
        fullmove_number += 1

    return replace(
        prev_state,
        king_moved=king_moved,
        rook_moved=rook_moved,
        en_passant_target=en_passant_target,
        halfmove_clock=halfmove_clock,
        fullmove_number=fullmove_number,
    )
