"""Tests for difficulty-tiered move selection."""

import random

import pytest

from chesslite.core.board import Board
from chesslite.core.enums import Color
from chesslite.core.move import Move
from chesslite.core.move_generator import legal_moves
from chesslite.core.notation import board_from_placement
from chesslite.engine.selector import Difficulty, select_move

# Black queen e4 can take the undefended white rook on h4 (value 5) or the
# pawn on f3 (value 1).
ROOK_OR_PAWN = "k7/8/8/8/4q2R/5P2/8/K7"

# Black queen e4 can take either of two rooks.
TWO_ROOKS = "k7/8/8/8/R3q2R/8/8/K7"

# Black's only piece is a pawn with a single step available.
SINGLE_MOVE = "8/8/p7/8/8/8/8/7K"


class TestNoMoves:
    @pytest.mark.parametrize("difficulty", list(Difficulty))
    def test_returns_none(self, difficulty: Difficulty) -> None:
        board = board_from_placement("8/8/8/8/8/8/8/4K3")
        assert select_move(board, Color.BLACK, difficulty) is None


class TestEasy:
    def test_single_legal_move_always_chosen(self) -> None:
        board = board_from_placement(SINGLE_MOVE)
        rng = random.Random(7)
        for _ in range(100):
            assert select_move(board, Color.BLACK, Difficulty.EASY, rng) == Move(2, 0, 3, 0)

    def test_seeded_rng_is_reproducible(self) -> None:
        board = Board.initial()
        first = select_move(board, Color.BLACK, Difficulty.EASY, random.Random(42))
        second = select_move(board, Color.BLACK, Difficulty.EASY, random.Random(42))
        assert first == second
        assert first in legal_moves(board, Color.BLACK)

    def test_uses_the_whole_move_list(self, rng: random.Random) -> None:
        board = Board.initial()
        seen = {select_move(board, Color.WHITE, Difficulty.EASY, rng) for _ in range(400)}
        assert seen == set(legal_moves(board, Color.WHITE))

    def test_works_without_injected_rng(self) -> None:
        board = Board.initial()
        assert select_move(board, Color.WHITE, Difficulty.EASY) in legal_moves(
            board, Color.WHITE
        )


class TestMedium:
    def test_prefers_highest_value_capture(self) -> None:
        board = board_from_placement(ROOK_OR_PAWN)
        for seed in range(20):
            move = select_move(board, Color.BLACK, Difficulty.MEDIUM, random.Random(seed))
            assert move == Move(4, 4, 4, 7)

    def test_ties_broken_randomly(self, rng: random.Random) -> None:
        board = board_from_placement(TWO_ROOKS)
        seen = {select_move(board, Color.BLACK, Difficulty.MEDIUM, rng) for _ in range(60)}
        assert seen == {Move(4, 4, 4, 0), Move(4, 4, 4, 7)}

    def test_without_captures_any_move_may_be_chosen(self, rng: random.Random) -> None:
        board = Board.initial()
        move = select_move(board, Color.BLACK, Difficulty.MEDIUM, rng)
        assert move in legal_moves(board, Color.BLACK)


class TestHard:
    def test_takes_hanging_rook(self) -> None:
        board = board_from_placement(ROOK_OR_PAWN)
        assert select_move(board, Color.BLACK, Difficulty.HARD) == Move(4, 4, 4, 7)

    def test_is_deterministic(self) -> None:
        board = Board.initial()
        first = select_move(board, Color.BLACK, Difficulty.HARD, random.Random(1))
        second = select_move(board, Color.BLACK, Difficulty.HARD, random.Random(2))
        assert first == second

    def test_ties_keep_first_enumerated_move(self) -> None:
        board = board_from_placement("k7/8/8/8/8/8/8/7K")
        assert select_move(board, Color.BLACK, Difficulty.HARD) == Move(0, 0, 0, 1)

    def test_avoids_losing_the_queen(self) -> None:
        # White rook h5 attacks the queen on e5; taking it first wins material.
        board = board_from_placement("k7/8/8/4q2R/8/8/8/1K6")
        move = select_move(board, Color.BLACK, Difficulty.HARD)
        assert move == Move(3, 4, 3, 7)

    def test_white_mover(self) -> None:
        board = board_from_placement("1k6/8/8/8/4Q2r/8/8/K7")
        assert select_move(board, Color.WHITE, Difficulty.HARD) == Move(4, 4, 4, 7)


class TestDifficulty:
    def test_parse_is_case_insensitive(self) -> None:
        assert Difficulty.parse("HARD") is Difficulty.HARD
        assert Difficulty.parse(" easy ") is Difficulty.EASY

    def test_parse_unknown(self) -> None:
        with pytest.raises(ValueError):
            Difficulty.parse("grandmaster")

    def test_str(self) -> None:
        assert str(Difficulty.MEDIUM) == "medium"
