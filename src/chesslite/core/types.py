"""Square type alias and coordinate helpers.

Board layout (row, col), with row 0 at the top of the screen:
    row 0 = rank 8 (black's back rank)
    row 7 = rank 1 (white's back rank)
    col 0 = file a, col 7 = file h
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = tuple[int, int]  # (row, col)

BOARD_SIZE = 8


def is_on_board(row: int, col: int) -> bool:
    """Whether (row, col) lies inside the 8x8 grid."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def square_name(row: int, col: int) -> str:
    """Human-readable name, e.g. (6, 4) → 'e2'."""
    if not is_on_board(row, col):
        raise ValueError(f"Square off board: {(row, col)!r}")
    return chr(ord("a") + col) + str(BOARD_SIZE - row)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → (4, 4)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return BOARD_SIZE - int(name[1]), ord(name[0]) - ord("a")


def all_squares() -> list[Square]:
    """Every square in row-major order."""
    return [(row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)]
