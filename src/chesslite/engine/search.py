"""Fixed-depth minimax over the material evaluation."""

from __future__ import annotations

import math
from collections.abc import Sequence

from chesslite.core.board import Board
from chesslite.core.enums import Color
from chesslite.core.move import Move
from chesslite.core.move_generator import apply_move, legal_moves
from chesslite.engine.evaluation import evaluate

# Black maximises, white minimises; this follows the evaluator's sign.
MAXIMIZING_COLOR = Color.BLACK


class MinimaxSearch:
    """Plain recursive minimax with a node counter.

    No pruning: every move of every ply is visited. The depths used by the
    move selector keep the tree at (legal-move count)² leaves.
    """

    __slots__ = ("nodes",)

    def __init__(self) -> None:
        self.nodes = 0

    def search(self, board: Board, plies_remaining: int, maximizing: bool) -> float:
        """Minimax value of *board* with *plies_remaining* plies left to play.

        A side with no legal moves scores as the worst outcome for itself:
        ``-inf`` when maximizing, ``+inf`` when minimizing.
        """
        self.nodes += 1
        if plies_remaining <= 0:
            return evaluate(board)

        color = MAXIMIZING_COLOR if maximizing else MAXIMIZING_COLOR.opposite
        moves = legal_moves(board, color)
        if not moves:
            return -math.inf if maximizing else math.inf

        scores = (
            self.search(apply_move(board, move), plies_remaining - 1, not maximizing)
            for move in moves
        )
        return max(scores) if maximizing else min(scores)

    def best_move(
        self, board: Board, color: Color, moves: Sequence[Move], reply_plies: int = 1
    ) -> tuple[Move | None, float]:
        """Best of *moves* for *color*, looking *reply_plies* plies past each one.

        Ties keep the earliest move in *moves*.
        """
        mover_maximizes = color == MAXIMIZING_COLOR
        best: Move | None = None
        best_score = -math.inf if mover_maximizes else math.inf

        for move in moves:
            score = self.search(
                apply_move(board, move), reply_plies, maximizing=not mover_maximizes
            )
            improved = score > best_score if mover_maximizes else score < best_score
            if best is None or improved:
                best = move
                best_score = score

        return best, best_score


def search(board: Board, plies_remaining: int, maximizing: bool) -> float:
    """Minimax value of *board*; see :meth:`MinimaxSearch.search`."""
    return MinimaxSearch().search(board, plies_remaining, maximizing)
