"""Core domain layer: board model and movement rules, no external dependencies.

Quick start::

    from chesslite.core import Board, Color, legal_moves, apply_move

    board = Board.initial()
    for move in legal_moves(board, Color.WHITE):
        print(move)
"""

from chesslite.core.board import Board
from chesslite.core.enums import Color, PieceType
from chesslite.core.move import Move
from chesslite.core.move_generator import apply_move, legal_destinations, legal_moves
from chesslite.core.notation import (
    STARTING_PLACEMENT,
    board_from_placement,
    board_to_placement,
)
from chesslite.core.piece import Piece
from chesslite.core.rules import is_legal, is_path_clear
from chesslite.core.types import Square, is_on_board, parse_square, square_name

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "Square",
    "is_on_board",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "Piece",
    # Rules / generation
    "apply_move",
    "is_legal",
    "is_path_clear",
    "legal_destinations",
    "legal_moves",
    # Notation
    "STARTING_PLACEMENT",
    "board_from_placement",
    "board_to_placement",
]
