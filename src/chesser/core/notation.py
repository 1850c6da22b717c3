"""FEN parsing and serialization for a board, side to move and GameState."""

from __future__ import annotations

from dataclasses import dataclass

from chesser.core.board import Board
from chesser.core.enums import Color
from chesser.core.piece import Piece
from chesser.core.state import GameState
from chesser.core.types import Square, parse_square, square_name

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

# FEN castling letter -> (color, rook home column)
_CASTLING_LETTERS: dict[str, tuple[Color, int]] = {
    "K": (Color.WHITE, 7),
    "Q": (Color.WHITE, 0),
    "k": (Color.BLACK, 7),
    "q": (Color.BLACK, 0),
}


@dataclass(frozen=True, slots=True)
class PositionRecord:
    """Everything legality depends on: board, side to move and state."""

    board: Board
    side_to_move: Color
    state: GameState


# ── Placement field ─────────────────────────────────────────────────────────


def board_from_fen(placement: str) -> Board:
    """Parse the piece-placement field, rank 8 first."""
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {placement!r}")

    slots: list[Piece | None] = []
    for rank_text in ranks:
        row: list[Piece | None] = []
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {placement!r}")
                row.extend([None] * step)
            else:
                row.append(Piece.from_char(ch))
            if len(row) > 8:
                raise ValueError(f"Invalid FEN rank width: {placement!r}")
        if len(row) != 8:
            raise ValueError(f"Invalid FEN rank width: {placement!r}")
        slots.extend(row)
    return Board(slots)


def board_to_fen(board: Board) -> str:
    """Serialise the piece placement, rank 8 first."""
    rows: list[str] = []
    for row in board.rows():
        empty = 0
        text = ""
        for piece in row:
            if piece is None:
                empty += 1
                continue
            if empty:
                text += str(empty)
                empty = 0
            text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)
    return "/".join(rows)


# ── Full record ─────────────────────────────────────────────────────────────


def position_from_fen(fen: str) -> PositionRecord:
    """Parse a FEN string into a :class:`PositionRecord`.

    Castling letters become the king/rook movement flags of the
    :class:`GameState`: a side with no letter at all has a moved king, a
    missing single letter marks that rook as moved.
    """
    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise ValueError(f"Invalid FEN (need 4-6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part = parts[:4]

    # 1. Piece placement
    board = board_from_fen(placement)

    # 2. Side to move
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}")

    # 3. Castling
    available: set[str] = set()
    if castling_part != "-":
        for ch in castling_part:
            if ch not in _CASTLING_LETTERS or ch in available:
                raise ValueError(f"Invalid FEN castling field: {castling_part!r}")
            available.add(ch)

    king_moved: set[Color] = set()
    rook_moved: set[tuple[Color, int]] = set()
    for color, letters in ((Color.WHITE, "KQ"), (Color.BLACK, "kq")):
        if not available.intersection(letters):
            king_moved.add(color)
            continue
        for letter in letters:
            if letter not in available:
                rook_moved.add(_CASTLING_LETTERS[letter])

    # 4. En passant
    ep: Square | None = None
    if ep_part != "-":
        ep = parse_square(ep_part)
        # White to move captures onto rank 6 (row 2), Black onto rank 3 (row 5).
        expected_row = 2 if side == Color.WHITE else 5
        if ep.row != expected_row:
            raise ValueError(
                f"Invalid FEN en-passant square for side-to-move: {ep_part!r}"
            )

    # 5–6. Clocks (optional)
    try:
        halfmove = int(parts[4]) if len(parts) > 4 else 0
        fullmove = int(parts[5]) if len(parts) > 5 else 1
    except ValueError:
        raise ValueError(f"Invalid FEN clock fields: {fen!r}") from None
    if halfmove < 0:
        raise ValueError(f"Invalid FEN halfmove clock: {parts[4]!r}")
    if fullmove < 1:
        raise ValueError(f"Invalid FEN fullmove number: {parts[5]!r}")

    state = GameState(
        king_moved=frozenset(king_moved),
        rook_moved=frozenset(rook_moved),
        en_passant_target=ep,
        halfmove_clock=halfmove,
        fullmove_number=fullmove,
    )
    return PositionRecord(board, side, state)


def position_to_fen(record: PositionRecord) -> str:
    """Serialise a :class:`PositionRecord` to FEN."""
    state = record.state

    castling_str = ""
    for letter, (color, rook_col) in _CASTLING_LETTERS.items():
        if not state.has_king_moved(color) and not state.has_rook_moved(
            color, rook_col
        ):
            castling_str += letter

    side_str = "w" if record.side_to_move == Color.WHITE else "b"
    ep_str = (
        square_name(state.en_passant_target)
        if state.en_passant_target is not None
        else "-"
    )
    return (
        f"{board_to_fen(record.board)} {side_str} {castling_str or '-'} {ep_str} "
        f"{state.halfmove_clock} {state.fullmove_number}"
    )
