"""Full move legality: piece shapes, castling and the self-check filter.

Dependency order: :mod:`~chesser.core.attacks` (geometry, check test)
→ :mod:`~chesser.core.execution` (simulation) → this module. Nothing below
imports from here.
"""

from __future__ import annotations

from chesser.core.attacks import (
    bishop_reaches,
    is_in_check,
    king_adjacent,
    knight_reaches,
    pawn_direction,
    queen_reaches,
    rook_reaches,
)
from chesser.core.board import Board
from chesser.core.enums import Color, PieceType
from chesser.core.execution import execute
from chesser.core.state import GameState
from chesser.core.types import ALL_SQUARES, Square, is_valid_square

PAWN_HOME_ROWS: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}
KINGSIDE_ROOK_COL = 7
QUEENSIDE_ROOK_COL = 0


# -- Public API -------------------------------------------------------------


def is_legal(
    board: Board, from_sq: Square, to_sq: Square, side: Color, state: GameState
) -> bool:
    """Can *side* move the piece on *from_sq* to *to_sq*?

    Never raises: off-board squares, an empty origin or a wrong-coloured
    piece simply make the move illegal.
    """
    if from_sq == to_sq:
        return False
    if not is_valid_square(from_sq) or not is_valid_square(to_sq):
        return False

    piece = board[from_sq]
    if piece is None or piece.color != side:
        return False
    target = board[to_sq]
    if target is not None and target.color == side:
        return False

    if not _shape_allows(board, from_sq, to_sq, piece.piece_type, side, state):
        return False

    # A move may never leave the mover's own king attacked.
    return not is_in_check(execute(board, from_sq, to_sq, state), side)


def legal_moves(board: Board, square: Square, state: GameState) -> frozenset[Square]:
    """All destinations the piece on *square* may legally move to."""
    piece = board.get(square)
    if piece is None:
        return frozenset()
    return frozenset(
        to_sq
        for to_sq in ALL_SQUARES
        if is_legal(board, square, to_sq, piece.color, state)
    )


def has_any_legal_move(board: Board, color: Color, state: GameState) -> bool:
    """Whether any piece of *color* has at least one legal move."""
    return any(legal_moves(board, sq, state) for sq, _ in board.occupied(color))


def can_castle(
    board: Board, from_sq: Square, to_sq: Square, color: Color, state: GameState
) -> bool:
    """Castling eligibility for a king two-column move from *from_sq*."""
    if state.has_king_moved(color):
        return False

    row, king_col = from_sq
    kingside = to_sq[1] > king_col
    rook_col = KINGSIDE_ROOK_COL if kingside else QUEENSIDE_ROOK_COL
    if state.has_rook_moved(color, rook_col):
        return False

    rook = board.get((row, rook_col))
    if rook is None or not rook.is_a(color, PieceType.ROOK):
        return False

    for col in range(min(king_col, rook_col) + 1, max(king_col, rook_col)):
        if not board.is_empty((row, col)):
            return False

    if is_in_check(board, color):
        return False

    # The king may neither pass through nor land on an attacked square.
    king = board[from_sq]
    step = 1 if kingside else -1
    for distance in (1, 2):
        transit = (row, king_col + distance * step)
        if is_in_check(board.updated({from_sq: None, transit: king}), color):
            return False
    return True


# -- Per-piece shape rules (private) ---------------------------------------


def _shape_allows(
    board: Board,
    from_sq: Square,
    to_sq: Square,
    ptype: PieceType,
    color: Color,
    state: GameState,
) -> bool:
    if ptype == PieceType.PAWN:
        return _pawn_allows(board, from_sq, to_sq, color, state)
    if ptype == PieceType.KNIGHT:
        return knight_reaches(from_sq, to_sq)
    if ptype == PieceType.BISHOP:
        return bishop_reaches(board, from_sq, to_sq)
    if ptype == PieceType.ROOK:
        return rook_reaches(board, from_sq, to_sq)
    if ptype == PieceType.QUEEN:
        return queen_reaches(board, from_sq, to_sq)
    return _king_allows(board, from_sq, to_sq, color, state)


def _pawn_allows(
    board: Board, from_sq: Square, to_sq: Square, color: Color, state: GameState
) -> bool:
    direction = pawn_direction(color)
    row_diff = to_sq[0] - from_sq[0]
    col_diff = abs(to_sq[1] - from_sq[1])

    if col_diff == 0:
        if not board.is_empty(to_sq):
            return False
        if row_diff == direction:
            return True
        return (
            from_sq[0] == PAWN_HOME_ROWS[color]
            and row_diff == 2 * direction
            and board.is_empty((from_sq[0] + direction, from_sq[1]))
        )

    if col_diff != 1 or row_diff != direction:
        return False

    target = board[to_sq]
    if target is not None:
        return target.color != color

    if to_sq != state.en_passant_target:
        return False
    victim = board[(from_sq[0], to_sq[1])]
    return victim is not None and victim.is_a(color.opposite, PieceType.PAWN)


def _king_allows(
    board: Board, from_sq: Square, to_sq: Square, color: Color, state: GameState
) -> bool:
    if king_adjacent(from_sq, to_sq):
        return True
    if to_sq[0] == from_sq[0] and abs(to_sq[1] - from_sq[1]) == 2:
        return can_castle(board, from_sq, to_sq, color, state)
    return False
