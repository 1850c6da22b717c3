"""Auxiliary game state that the board alone cannot recover."""

from __future__ import annotations

from dataclasses import dataclass, field

from chesser.core.enums import Color
from chesser.core.types import Square


@dataclass(frozen=True, slots=True)
class GameState:
    """Castling history, en-passant target and move counters.

    ``GameState()`` is the state at the start of a game. Each accepted move
    yields a fresh value via :func:`chesser.core.execution.derive_state`;
    the engine never modifies or retains one.
    """

    king_moved: frozenset[Color] = field(default_factory=frozenset)
    # (color, origin column) of every rook that has left its square
    rook_moved: frozenset[tuple[Color, int]] = field(default_factory=frozenset)
    en_passant_target: Square | None = None
    halfmove_clock: int = 0
    fullmove_number: int = 1

    def has_king_moved(self, color: Color) -> bool:
        return color in self.king_moved

    def has_rook_moved(self, color: Color, col: int) -> bool:
        return (color, col) in self.rook_moved
