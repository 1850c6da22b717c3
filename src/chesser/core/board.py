"""Board - immutable piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence

from chesser.core.enums import Color, PieceType
from chesser.core.piece import Piece
from chesser.core.types import ALL_SQUARES, Square, is_valid_square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


def _index(sq: tuple[int, int]) -> int:
    if not is_valid_square(sq):
        raise IndexError(f"Square off the board: {sq!r}")
    row, col = sq
    return row * 8 + col


class Board:
    """Immutable 64-slot board indexed by ``(row, col)``.

    Every change goes through :meth:`updated`, which returns a new board;
    no board value is ever modified after construction.
    """

    __slots__ = ("_squares",)

    def __init__(self, squares: Iterable[Piece | None] | None = None) -> None:
        slots = tuple(squares) if squares is not None else (None,) * 64
        if len(slots) != 64:
            raise ValueError(f"Board needs 64 squares, got {len(slots)}")
        self._squares: tuple[Piece | None, ...] = slots

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: tuple[int, int]) -> Piece | None:
        """Piece on *sq*; raises ``IndexError`` for a square off the board."""
        return self._squares[_index(sq)]

    def get(self, sq: tuple[int, int]) -> Piece | None:
        """Piece on *sq*, or ``None`` when empty or off the board."""
        if not is_valid_square(sq):
            return None
        return self._squares[_index(sq)]

    def is_empty(self, sq: tuple[int, int]) -> bool:
        return self._squares[_index(sq)] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self, color: Color | None = None) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` for every piece, optionally of one *color*."""
        for sq, piece in zip(ALL_SQUARES, self._squares):
            if piece is not None and (color is None or piece.color == color):
                yield sq, piece

    def find_king(self, color: Color) -> Square | None:
        """First square holding *color*'s king, scanning from a8."""
        for sq, piece in self.occupied(color):
            if piece.piece_type == PieceType.KING:
                return sq
        return None

    def is_well_formed(self) -> bool:
        """Exactly one king per side."""
        kings = [
            piece.color
            for _, piece in self.occupied()
            if piece.piece_type == PieceType.KING
        ]
        return kings.count(Color.WHITE) == 1 and kings.count(Color.BLACK) == 1

    def rows(self) -> tuple[tuple[Piece | None, ...], ...]:
        """Nested 8x8 view, row 0 (rank 8) first."""
        return tuple(self._squares[r * 8 : r * 8 + 8] for r in range(8))

    # -- Derivation ---------------------------------------------------------

    def updated(self, changes: Mapping[tuple[int, int], Piece | None]) -> Board:
        """New board with *changes* applied; ``self`` is left untouched."""
        if not changes:
            return self
        slots = list(self._squares)
        for sq, piece in changes.items():
            slots[_index(sq)] = piece
        return Board(slots)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        slots: list[Piece | None] = [None] * 64
        for col, pt in enumerate(_BACK_RANK):
            slots[_index((0, col))] = Piece(Color.BLACK, pt)
            slots[_index((1, col))] = Piece(Color.BLACK, PieceType.PAWN)
            slots[_index((6, col))] = Piece(Color.WHITE, PieceType.PAWN)
            slots[_index((7, col))] = Piece(Color.WHITE, pt)
        return cls(slots)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Piece | None]]) -> Board:
        """Build from a nested 8x8 grid, row 0 (rank 8) first."""
        if len(rows) != 8 or any(len(row) != 8 for row in rows):
            raise ValueError("Board grid must be 8 rows of 8 squares")
        return cls(piece for row in rows for piece in row)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __hash__(self) -> int:
        return hash(self._squares)

    def __repr__(self) -> str:
        lines: list[str] = []
        for row_idx, row in enumerate(self.rows()):
            cells = " ".join(str(p) if p else "." for p in row)
            lines.append(f"{8 - row_idx} {cells}")
        lines.append("  a b c d e f g h")
        return "\n".join(lines)
