"""Board placement text (the first field of a FEN record)."""

from __future__ import annotations

from chesslite.core.board import Board
from chesslite.core.piece import Piece
from chesslite.core.types import BOARD_SIZE, Square

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def board_from_placement(placement: str) -> Board:
    """Parse a FEN piece-placement field into a :class:`Board`.

    Ranks are listed from rank 8 down, so the first rank text fills row 0.
    """
    ranks = placement.strip().split("/")
    if len(ranks) != BOARD_SIZE:
        raise ValueError(f"Invalid placement (must contain 8 ranks): {placement!r}")

    pieces: dict[Square, Piece] = {}
    for row, rank_text in enumerate(ranks):
        col = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise ValueError(f"Invalid placement digit {ch!r}: {placement!r}")
                col += step
            else:
                if col >= BOARD_SIZE:
                    raise ValueError(f"Invalid placement rank width: {placement!r}")
                pieces[(row, col)] = Piece.from_char(ch)
                col += 1
            if col > BOARD_SIZE:
                raise ValueError(f"Invalid placement rank width: {placement!r}")
        if col != BOARD_SIZE:
            raise ValueError(f"Invalid placement rank width: {placement!r}")

    return Board(pieces)


def board_to_placement(board: Board) -> str:
    """Serialise *board* as a FEN piece-placement field."""
    ranks: list[str] = []
    for row in range(BOARD_SIZE):
        text = ""
        empty = 0
        for col in range(BOARD_SIZE):
            piece = board[row, col]
            if piece is None:
                empty += 1
                continue
            if empty:
                text += str(empty)
                empty = 0
            text += str(piece)
        if empty:
            text += str(empty)
        ranks.append(text)
    return "/".join(ranks)
