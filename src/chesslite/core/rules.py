"""Movement legality: per-kind geometry plus path obstruction.

This is a movement engine, not a full chess-legality engine: a move that
leaves the mover's own king capturable is still legal here.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chesslite.core.enums import Color, PieceType
from chesslite.core.types import is_on_board

if TYPE_CHECKING:
    from chesslite.core.board import Board
    from chesslite.core.piece import Piece

PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
PAWN_HOME_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def is_path_clear(
    board: Board, from_row: int, from_col: int, to_row: int, to_col: int
) -> bool:
    """Whether every square strictly between source and destination is empty.

    Only meaningful for straight or diagonal lines.
    """
    row_step = _sign(to_row - from_row)
    col_step = _sign(to_col - from_col)
    row = from_row + row_step
    col = from_col + col_step
    while (row, col) != (to_row, to_col):
        if board.piece_at(row, col) is not None:
            return False
        row += row_step
        col += col_step
    return True


def _pawn_move_ok(
    board: Board, piece: Piece, from_row: int, from_col: int, to_row: int, to_col: int
) -> bool:
    direction = PAWN_DIRECTION[piece.color]
    target = board.piece_at(to_row, to_col)

    if from_col == to_col:
        if target is not None:
            return False
        if to_row == from_row + direction:
            return True
        return (
            from_row == PAWN_HOME_ROW[piece.color]
            and to_row == from_row + 2 * direction
            and board.piece_at(from_row + direction, from_col) is None
        )

    # Diagonal steps are captures only.
    return (
        abs(to_col - from_col) == 1
        and to_row == from_row + direction
        and target is not None
        and target.color != piece.color
    )


def piece_move_ok(
    board: Board, piece: Piece, from_row: int, from_col: int, to_row: int, to_col: int
) -> bool:
    """Per-kind movement rule for *piece*, ignoring bounds and self-capture."""
    dr = abs(to_row - from_row)
    dc = abs(to_col - from_col)

    match piece.piece_type:
        case PieceType.PAWN:
            return _pawn_move_ok(board, piece, from_row, from_col, to_row, to_col)
        case PieceType.KNIGHT:
            return (dr, dc) in ((2, 1), (1, 2))
        case PieceType.KING:
            return dr <= 1 and dc <= 1
        case PieceType.BISHOP:
            return dr == dc > 0 and is_path_clear(
                board, from_row, from_col, to_row, to_col
            )
        case PieceType.ROOK:
            return (dr == 0) != (dc == 0) and is_path_clear(
                board, from_row, from_col, to_row, to_col
            )
        case PieceType.QUEEN:
            straight = (dr == 0) != (dc == 0)
            diagonal = dr == dc > 0
            return (straight or diagonal) and is_path_clear(
                board, from_row, from_col, to_row, to_col
            )
    raise AssertionError(f"Unhandled piece type: {piece.piece_type!r}")


def is_legal(
    board: Board, from_row: int, from_col: int, to_row: int, to_col: int
) -> bool:
    """Whether moving the piece on (from_row, from_col) to (to_row, to_col) is legal.

    Total over all integer coordinates: off-board squares, an empty source
    and self-capture all answer False.
    """
    if not (is_on_board(from_row, from_col) and is_on_board(to_row, to_col)):
        return False

    piece = board.piece_at(from_row, from_col)
    if piece is None:
        return False

    target = board.piece_at(to_row, to_col)
    if target is not None and target.color == piece.color:
        return False

    return piece_move_ok(board, piece, from_row, from_col, to_row, to_col)
