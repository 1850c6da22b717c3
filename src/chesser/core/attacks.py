"""Geometric attack detection and check test.

This module sits strictly below :mod:`chesser.core.legality`: it never
simulates moves, so legality may call :func:`is_in_check` on simulated
boards without recursing back into itself.
"""

from __future__ import annotations

from chesser.core.board import Board
from chesser.core.enums import Color, PieceType
from chesser.core.types import Square, is_valid_square, sign

KNIGHT_SHAPES: frozenset[tuple[int, int]] = frozenset({(1, 2), (2, 1)})


def pawn_direction(color: Color) -> int:
    """Row step of a forward pawn move: White heads for row 0."""
    return -1 if color == Color.WHITE else 1


# -- Shape helpers (shared with legality) ------------------------------------


def is_path_clear(board: Board, from_sq: Square, to_sq: Square) -> bool:
    """Whether every square strictly between the two squares is empty.

    Only meaningful for squares on a common row, column or diagonal.
    """
    from_row, from_col = from_sq
    to_row, to_col = to_sq
    row_step = sign(to_row - from_row)
    col_step = sign(to_col - from_col)

    row, col = from_row + row_step, from_col + col_step
    while (row, col) != (to_row, to_col):
        if not is_valid_square((row, col)) or not board.is_empty((row, col)):
            return False
        row += row_step
        col += col_step
    return True


def rook_reaches(board: Board, from_sq: Square, to_sq: Square) -> bool:
    if from_sq[0] != to_sq[0] and from_sq[1] != to_sq[1]:
        return False
    return is_path_clear(board, from_sq, to_sq)


def bishop_reaches(board: Board, from_sq: Square, to_sq: Square) -> bool:
    if abs(from_sq[0] - to_sq[0]) != abs(from_sq[1] - to_sq[1]):
        return False
    return is_path_clear(board, from_sq, to_sq)


def queen_reaches(board: Board, from_sq: Square, to_sq: Square) -> bool:
    return rook_reaches(board, from_sq, to_sq) or bishop_reaches(
        board, from_sq, to_sq
    )


def knight_reaches(from_sq: Square, to_sq: Square) -> bool:
    shape = (abs(from_sq[0] - to_sq[0]), abs(from_sq[1] - to_sq[1]))
    return shape in KNIGHT_SHAPES


def king_adjacent(from_sq: Square, to_sq: Square) -> bool:
    return abs(from_sq[0] - to_sq[0]) <= 1 and abs(from_sq[1] - to_sq[1]) <= 1


# -- Public API -------------------------------------------------------------


def attacks(board: Board, from_sq: Square, to_sq: Square) -> bool:
    """Does the piece on *from_sq* attack *to_sq*?

    Ignores whose turn it is and whether the attacker's own king would be
    exposed. Pawns attack diagonally forward whether or not the target is
    occupied; kings attack adjacent squares only.
    """
    if from_sq == to_sq or not is_valid_square(to_sq):
        return False
    piece = board.get(from_sq)
    if piece is None:
        return False

    ptype = piece.piece_type
    if ptype == PieceType.PAWN:
        row_diff = to_sq[0] - from_sq[0]
        return (
            abs(to_sq[1] - from_sq[1]) == 1
            and row_diff == pawn_direction(piece.color)
        )
    if ptype == PieceType.KNIGHT:
        return knight_reaches(from_sq, to_sq)
    if ptype == PieceType.BISHOP:
        return bishop_reaches(board, from_sq, to_sq)
    if ptype == PieceType.ROOK:
        return rook_reaches(board, from_sq, to_sq)
    if ptype == PieceType.QUEEN:
        return queen_reaches(board, from_sq, to_sq)
    return king_adjacent(from_sq, to_sq)


def is_square_attacked(board: Board, sq: Square, by_color: Color) -> bool:
    """Is *sq* attacked by any piece of *by_color*?"""
    return any(
        attacks(board, from_sq, sq) for from_sq, _ in board.occupied(by_color)
    )


def is_in_check(board: Board, color: Color) -> bool:
    """Is *color*'s king attacked? ``False`` when the king is missing."""
    king_sq = board.find_king(color)
    if king_sq is None:
        return False
    return is_square_attacked(board, king_sq, color.opposite)
