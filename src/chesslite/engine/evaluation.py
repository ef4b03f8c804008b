"""Material evaluation.

Scores are from black's point of view: black material counts positive,
white material negative. The search maximises for black.
"""

from __future__ import annotations

from chesslite.core.board import Board
from chesslite.core.enums import Color, PieceType
from chesslite.core.move import Move

PIECE_VALUES: dict[PieceType, int] = {
    PieceType.PAWN: 1,
    PieceType.KNIGHT: 3,
    PieceType.BISHOP: 3,
    PieceType.ROOK: 5,
    PieceType.QUEEN: 9,
    PieceType.KING: 1000,
}


def evaluate(board: Board) -> int:
    """Signed material score of *board* (positive favours black)."""
    score = 0
    for _sq, piece in board.occupied():
        value = PIECE_VALUES[piece.piece_type]
        score += value if piece.color == Color.BLACK else -value
    return score


def capture_value(board: Board, move: Move) -> int:
    """Value of the piece standing on the destination of *move* (0 if empty)."""
    target = board.piece_at(move.to_row, move.to_col)
    if target is None:
        return 0
    return PIECE_VALUES[target.piece_type]
