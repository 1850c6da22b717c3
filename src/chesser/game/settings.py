"""Match configuration."""

from __future__ import annotations

from dataclasses import dataclass

from chesser.core.notation import STARTING_FEN


@dataclass
class MatchSettings:
    """All session-level settings."""

    # Half-moves without a pawn move or capture before the draw is declared
    fifty_move_threshold: int = 50

    # Position the match starts from (and returns to on reset)
    start_fen: str = STARTING_FEN

    def __post_init__(self) -> None:
        if self.fifty_move_threshold < 1:
            raise ValueError(
                f"fifty_move_threshold must be positive, got {self.fifty_move_threshold}"
            )
