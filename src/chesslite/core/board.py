"""Board - immutable piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from chesslite.core.enums import Color, PieceType
from chesslite.core.piece import Piece
from chesslite.core.types import BOARD_SIZE, Square, is_on_board

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


def _index(row: int, col: int) -> int:
    return row * BOARD_SIZE + col


class Board:
    """Immutable 64-square board.

    Every change produces a new board via :meth:`with_move` or
    :meth:`with_piece`; existing boards are never modified, so they can be
    shared freely between the caller and the search.
    """

    __slots__ = ("_squares",)

    _squares: tuple[Piece | None, ...]

    def __init__(self, placement: Mapping[Square, Piece] | None = None) -> None:
        squares: list[Piece | None] = [None] * (BOARD_SIZE * BOARD_SIZE)
        for (row, col), piece in (placement or {}).items():
            if not is_on_board(row, col):
                raise ValueError(f"Square off board: {(row, col)!r}")
            squares[_index(row, col)] = piece
        object.__setattr__(self, "_squares", tuple(squares))

    @classmethod
    def _from_squares(cls, squares: tuple[Piece | None, ...]) -> Board:
        b = cls.__new__(cls)
        object.__setattr__(b, "_squares", squares)
        return b

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Board is immutable")

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position: black on rows 0-1, white on rows 6-7."""
        placement: dict[Square, Piece] = {}
        for col, pt in enumerate(_BACK_RANK):
            placement[(0, col)] = Piece(Color.BLACK, pt)
            placement[(1, col)] = Piece(Color.BLACK, PieceType.PAWN)
            placement[(6, col)] = Piece(Color.WHITE, PieceType.PAWN)
            placement[(7, col)] = Piece(Color.WHITE, pt)
        return cls(placement)

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        row, col = sq
        if not is_on_board(row, col):
            raise IndexError(f"Square off board: {sq!r}")
        return self._squares[_index(row, col)]

    def piece_at(self, row: int, col: int) -> Piece | None:
        """Occupant of (row, col); None for empty or off-board squares."""
        if not is_on_board(row, col):
            return None
        return self._squares[_index(row, col)]

    def is_empty(self, row: int, col: int) -> bool:
        return self.piece_at(row, col) is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Occupied squares with their pieces, in row-major order."""
        for idx, piece in enumerate(self._squares):
            if piece is not None:
                yield divmod(idx, BOARD_SIZE), piece

    def piece_count(self, color: Color | None = None) -> int:
        """Number of pieces on the board, optionally for one side only."""
        return sum(
            1
            for piece in self._squares
            if piece is not None and (color is None or piece.color == color)
        )

    # -- Copy-on-write ------------------------------------------------------

    def with_piece(self, row: int, col: int, piece: Piece | None) -> Board:
        """New board with (row, col) set to *piece* (None clears it)."""
        if not is_on_board(row, col):
            raise ValueError(f"Square off board: {(row, col)!r}")
        squares = list(self._squares)
        squares[_index(row, col)] = piece
        return Board._from_squares(tuple(squares))

    def with_move(self, from_row: int, from_col: int, to_row: int, to_col: int) -> Board:
        """New board with the source emptied and its piece on the destination.

        Whatever stood on the destination is overwritten; no legality check.
        """
        if not (is_on_board(from_row, from_col) and is_on_board(to_row, to_col)):
            raise ValueError(
                f"Square off board: {(from_row, from_col)!r} -> {(to_row, to_col)!r}"
            )
        squares = list(self._squares)
        squares[_index(to_row, to_col)] = squares[_index(from_row, from_col)]
        squares[_index(from_row, from_col)] = None
        return Board._from_squares(tuple(squares))

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __hash__(self) -> int:
        return hash(self._squares)

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            cells = []
            for col in range(BOARD_SIZE):
                p = self._squares[_index(row, col)]
                cells.append(str(p) if p else ".")
            rows.append(f"{BOARD_SIZE - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)

    def render(self) -> str:
        """Board drawn with Unicode figurines, rank 8 at the top."""
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            cells = []
            for col in range(BOARD_SIZE):
                p = self._squares[_index(row, col)]
                cells.append(p.symbol if p else "·")
            rows.append(f"{BOARD_SIZE - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
