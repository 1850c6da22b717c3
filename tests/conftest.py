"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chesser.core.notation import STARTING_FEN, PositionRecord, position_from_fen

# After 1.f3 e5 2.g4 Qh4#, white is mated
FOOLS_MATE_FEN = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"

# Black king a8 boxed in by Qb6 and Kc6, not in check
STALEMATE_FEN = "k7/8/1QK5/8/8/8/8/8 b - - 0 1"

# Both sides may castle either way
CASTLING_FEN = "r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1"


@pytest.fixture
def start() -> PositionRecord:
    """The standard starting position."""
    return position_from_fen(STARTING_FEN)


@pytest.fixture
def fools_mate() -> PositionRecord:
    return position_from_fen(FOOLS_MATE_FEN)


@pytest.fixture
def stalemate() -> PositionRecord:
    return position_from_fen(STALEMATE_FEN)


@pytest.fixture
def castling() -> PositionRecord:
    return position_from_fen(CASTLING_FEN)
