"""Difficulty-tiered computer move selection."""

from __future__ import annotations

import logging
import random
from enum import Enum

from chesslite.core.board import Board
from chesslite.core.enums import Color
from chesslite.core.move import Move
from chesslite.core.move_generator import legal_moves
from chesslite.engine.evaluation import capture_value
from chesslite.engine.search import MinimaxSearch

_LOGGER = logging.getLogger(__name__)

# Plies examined after the candidate move in the hard tier (one reply).
HARD_REPLY_PLIES = 1

_DEFAULT_RNG = random.Random()


class Difficulty(Enum):
    """Strength tier of the computer opponent."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> Difficulty:
        try:
            return cls(text.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown difficulty: {text!r}") from None


def _select_easy(moves: list[Move], rng: random.Random) -> Move:
    return rng.choice(moves)


def _select_medium(board: Board, moves: list[Move], rng: random.Random) -> Move:
    best_score = max(capture_value(board, move) for move in moves)
    best_moves = [move for move in moves if capture_value(board, move) == best_score]
    return rng.choice(best_moves)


def _select_hard(board: Board, color: Color, moves: list[Move]) -> Move | None:
    searcher = MinimaxSearch()
    move, score = searcher.best_move(board, color, moves, reply_plies=HARD_REPLY_PLIES)
    _LOGGER.debug("Minimax visited %d nodes, best score %s", searcher.nodes, score)
    return move


def select_move(
    board: Board,
    color: Color,
    difficulty: Difficulty,
    rng: random.Random | None = None,
) -> Move | None:
    """Choose a move for *color* on *board*, or None if it has no legal move.

    Args:
        board: Position to move from.
        color: Side to move.
        difficulty: EASY picks uniformly at random, MEDIUM picks randomly
            among the most valuable captures, HARD runs a two-ply minimax and
            keeps the first best move in enumeration order.
        rng: Random source for the EASY/MEDIUM tie-breaks. A process-wide
            instance is used when omitted; pass a seeded one for
            reproducible games.
    """
    moves = legal_moves(board, color)
    if not moves:
        _LOGGER.debug("No legal moves for %s", color)
        return None

    rng = rng or _DEFAULT_RNG
    match difficulty:
        case Difficulty.EASY:
            move = _select_easy(moves, rng)
        case Difficulty.MEDIUM:
            move = _select_medium(board, moves, rng)
        case Difficulty.HARD:
            move = _select_hard(board, color, moves)
        case _:
            raise ValueError(f"Unknown difficulty: {difficulty!r}")

    _LOGGER.debug(
        "%s selected %s for %s out of %d moves", difficulty, move, color, len(moves)
    )
    return move
