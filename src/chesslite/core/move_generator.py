"""Legal move enumeration and move application."""

from __future__ import annotations

from chesslite.core.board import Board
from chesslite.core.enums import Color
from chesslite.core.move import Move
from chesslite.core.rules import is_legal
from chesslite.core.types import Square, all_squares, is_on_board


def _moves_from(board: Board, from_row: int, from_col: int) -> list[Move]:
    return [
        Move(from_row, from_col, to_row, to_col)
        for to_row, to_col in all_squares()
        if is_legal(board, from_row, from_col, to_row, to_col)
    ]


def legal_moves(
    board: Board,
    color: Color,
    from_row: int | None = None,
    from_col: int | None = None,
) -> list[Move]:
    """Every legal move for *color*, optionally restricted to one source square.

    Moves are ordered by source row, source column, destination row and
    destination column, so callers that break ties by position get the
    same answer every time.
    """
    if from_row is not None or from_col is not None:
        if from_row is None or from_col is None:
            raise TypeError("from_row and from_col must be given together")
        piece = board.piece_at(from_row, from_col)
        if piece is None or piece.color != color:
            return []
        return _moves_from(board, from_row, from_col)

    moves: list[Move] = []
    for row, col in all_squares():
        piece = board.piece_at(row, col)
        if piece is not None and piece.color == color:
            moves.extend(_moves_from(board, row, col))
    return moves


def legal_destinations(board: Board, from_row: int, from_col: int) -> list[Square]:
    """Destination squares for the piece on (from_row, from_col), for highlighting."""
    if not is_on_board(from_row, from_col):
        return []
    return [move.to_square for move in _moves_from(board, from_row, from_col)]


def apply_move(board: Board, move: Move) -> Board:
    """New board with *move* played; *board* itself is left untouched."""
    return board.with_move(move.from_row, move.from_col, move.to_row, move.to_col)
