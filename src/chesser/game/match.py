"""Match — the session that owns a game and feeds moves to the engine.

Holds the board, side to move, :class:`~chesser.core.state.GameState` and
move history, and declares the game result after every move. Emits events
via simple callbacks so a UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chesser.core.attacks import is_in_check
from chesser.core.board import Board
from chesser.core.enums import Color, GameStatus, MoveFlag
from chesser.core.execution import classify_move, derive_state, execute
from chesser.core.legality import is_legal, legal_moves
from chesser.core.move import Move
from chesser.core.notation import position_from_fen
from chesser.core.piece import Piece
from chesser.core.rules import Rules
from chesser.core.state import GameState
from chesser.core.types import Square
from chesser.game.settings import MatchSettings

_LOGGER = logging.getLogger(__name__)

_STATUS_MESSAGES: dict[GameStatus, str] = {
    GameStatus.ACTIVE: "Game in progress",
    GameStatus.STALEMATE: "Draw by stalemate!",
    GameStatus.FIFTY_MOVE_DRAW: "Draw by 50-move rule!",
}


@dataclass(frozen=True)
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    piece: Piece
    identifier: str
    flag: MoveFlag = MoveFlag.NORMAL
    was_capture: bool = False
    was_check: bool = False


# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, "Match"], None]
GameOverCallback = Callable[[GameStatus, "Color | None"], None]  # status, winner


@dataclass
class MatchEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Match ────────────────────────────────────────────────────────────────────


class Match:
    """A single game between two sides sharing one board.

    Methods are meant to be called from a single thread.
    """

    def __init__(self, settings: MatchSettings | None = None) -> None:
        self.settings = settings if settings is not None else MatchSettings()
        self.events = MatchEvents()
        self.reset()

    # ── Lifecycle ────────────────────────────────────────────────────────

    def reset(self) -> None:
        """Return to the configured start position with an empty history."""
        record = position_from_fen(self.settings.start_fen)
        self.board: Board = record.board
        self.side_to_move: Color = record.side_to_move
        self.state: GameState = record.state
        self.history: list[MoveRecord] = []
        self.status = GameStatus.ACTIVE
        self.winner: Color | None = None
        self._evaluate_status()

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.status.is_over

    @property
    def is_in_check(self) -> bool:
        """Is the side to move in check?"""
        return is_in_check(self.board, self.side_to_move)

    @property
    def status_message(self) -> str:
        if self.status == GameStatus.CHECKMATE and self.winner is not None:
            return f"{str(self.winner).capitalize()} wins by checkmate!"
        return _STATUS_MESSAGES.get(self.status, self.status.name)

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.history)

    def legal_moves(self, square: Square) -> frozenset[Square]:
        """Destinations for the piece on *square*, if it belongs to the mover."""
        if self.is_game_over:
            return frozenset()
        piece = self.board.get(square)
        if piece is None or piece.color != self.side_to_move:
            return frozenset()
        return legal_moves(self.board, square, self.state)

    # ── Move application ─────────────────────────────────────────────────

    def submit_move(self, from_sq: Square, to_sq: Square) -> bool:
        """Play a move for the side to move. Returns True if legal and applied."""
        if self.is_game_over:
            _LOGGER.debug("Move %s-%s rejected: game is over", from_sq, to_sq)
            return False
        if not is_legal(self.board, from_sq, to_sq, self.side_to_move, self.state):
            _LOGGER.debug(
                "Illegal move %s-%s for %s", from_sq, to_sq, self.side_to_move
            )
            return False

        board = self.board
        piece = board[from_sq]
        assert piece is not None
        move = Move(Square(*from_sq), Square(*to_sq))
        flag = classify_move(board, from_sq, to_sq, self.state)
        was_capture = board[to_sq] is not None or flag == MoveFlag.EN_PASSANT

        self.board = execute(board, from_sq, to_sq, self.state)
        self.state = derive_state(self.state, board, from_sq, to_sq)
        self.side_to_move = self.side_to_move.opposite

        record = MoveRecord(
            move=move,
            piece=piece,
            identifier=move.identifier(piece),
            flag=flag,
            was_capture=was_capture,
            was_check=self.is_in_check,
        )
        self.history.append(record)
        _LOGGER.debug("Played %s (ply %d)", record.identifier, self.ply_count)

        self._emit_move(record)
        self._evaluate_status()
        if self.is_game_over:
            _LOGGER.info(
                "Game over after %d plies: %s", self.ply_count, self.status_message
            )
            self._emit_game_over()
        return True

    # ── Internal ─────────────────────────────────────────────────────────

    def _evaluate_status(self) -> None:
        status = Rules.status(self.board, self.side_to_move, self.state)
        if status == GameStatus.CHECKMATE:
            self.winner = self.side_to_move.opposite
        elif (
            status == GameStatus.ACTIVE
            and self.state.halfmove_clock >= self.settings.fifty_move_threshold
        ):
            status = GameStatus.FIFTY_MOVE_DRAW
        self.status = status

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self)

    def _emit_game_over(self) -> None:
        for cb in self.events.on_game_over:
            cb(self.status, self.winner)
