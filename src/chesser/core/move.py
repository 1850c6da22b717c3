"""Move value object (coordinate representation)."""

from __future__ import annotations

from dataclasses import dataclass

from chesser.core.piece import Piece
from chesser.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable ``(from, to)`` pair as submitted by a player."""

    from_sq: Square
    to_sq: Square

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"

    def identifier(self, piece: Piece) -> str:
        """History label: piece type then both squares, e.g. ``pawne2e4``."""
        return f"{piece.piece_type.name.lower()}{self}"
