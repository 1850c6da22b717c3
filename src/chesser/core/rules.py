"""High-level chess rules: check, checkmate and stalemate detection."""

from __future__ import annotations

from chesser.core.attacks import is_in_check
from chesser.core.board import Board
from chesser.core.enums import Color, GameStatus
from chesser.core.legality import has_any_legal_move
from chesser.core.state import GameState


def is_checkmate(board: Board, color: Color, state: GameState) -> bool:
    """*color* is in check and has no legal move."""
    if not is_in_check(board, color):
        return False
    return not has_any_legal_move(board, color, state)


def is_stalemate(board: Board, color: Color, state: GameState) -> bool:
    """*color* is not in check but has no legal move."""
    if is_in_check(board, color):
        return False
    return not has_any_legal_move(board, color, state)


class Rules:
    """Static rule-checker over a board, a side and its :class:`GameState`."""

    # Product policy:
    # - Terminal positions only: checkmate and stalemate.
    # - The 50-move draw is declared by the hosting session, not here.

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return is_in_check(board, color)

    @staticmethod
    def is_checkmate(board: Board, color: Color, state: GameState) -> bool:
        return is_checkmate(board, color, state)

    @staticmethod
    def is_stalemate(board: Board, color: Color, state: GameState) -> bool:
        return is_stalemate(board, color, state)

    @staticmethod
    def status(board: Board, color: Color, state: GameState) -> GameStatus:
        """Terminal status of the position with *color* to move."""
        if has_any_legal_move(board, color, state):
            return GameStatus.ACTIVE
        if is_in_check(board, color):
            return GameStatus.CHECKMATE
        return GameStatus.STALEMATE
