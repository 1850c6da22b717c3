"""Game management layer — the match session around the rules engine.

Quick start::

    from chesser.core import parse_square
    from chesser.game import Match

    match = Match()
    match.submit_move(parse_square("e2"), parse_square("e4"))
    print(match.status_message)
"""

from chesser.game.match import Match, MatchEvents, MoveRecord
from chesser.game.settings import MatchSettings

__all__ = [
    "Match",
    "MatchEvents",
    "MatchSettings",
    "MoveRecord",
]
