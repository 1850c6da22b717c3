"""Square type and coordinate helpers.

Board layout (row-major, rank 8 on top):
    row 0 = rank 8, row 7 = rank 1
    col 0 = file a, col 7 = file h

    a8=(0, 0), h8=(0, 7)
    a1=(7, 0), h1=(7, 7)
"""

from __future__ import annotations

from typing import NamedTuple


class Square(NamedTuple):
    """A ``(row, col)`` board coordinate. Plain tuples compare equal."""

    row: int
    col: int

    def __str__(self) -> str:
        return square_name(self)


def is_valid_square(sq: tuple[int, int]) -> bool:
    """Check whether both coordinates lie in 0–7."""
    row, col = sq
    return 0 <= row < 8 and 0 <= col < 8


def square_name(sq: tuple[int, int]) -> str:
    """Human-readable name, e.g. (6, 4) → 'e2'."""
    row, col = sq
    return chr(ord("a") + col) + str(8 - row)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e2' → Square(6, 4)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(8 - int(name[1]), ord(name[0]) - ord("a"))


def sign(value: int) -> int:
    """-1, 0 or 1 according to the sign of *value*."""
    return (value > 0) - (value < 0)


ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(row, col) for row in range(8) for col in range(8)
)
