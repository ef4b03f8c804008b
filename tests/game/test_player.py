"""Tests for Player implementations."""

import random

from chesslite.core.board import Board
from chesslite.core.enums import Color
from chesslite.core.move_generator import legal_moves
from chesslite.core.notation import board_from_placement
from chesslite.engine.selector import Difficulty
from chesslite.game.player import AIPlayer, HumanPlayer


class TestHumanPlayer:
    def test_properties(self) -> None:
        p = HumanPlayer(Color.WHITE, "Alice")
        assert p.color == Color.WHITE
        assert p.name == "Alice"
        assert p.is_human is True

    def test_default_name(self) -> None:
        p = HumanPlayer(Color.BLACK)
        assert "black" in p.name.lower()

    def test_choose_move_is_none(self) -> None:
        assert HumanPlayer(Color.WHITE).choose_move(Board.initial()) is None


class TestAIPlayer:
    def test_properties(self) -> None:
        p = AIPlayer(Color.BLACK, Difficulty.HARD, name="Engine")
        assert p.color == Color.BLACK
        assert p.name == "Engine"
        assert p.is_human is False
        assert p.difficulty is Difficulty.HARD

    def test_choose_move_is_legal(self) -> None:
        p = AIPlayer(Color.BLACK, Difficulty.EASY, random.Random(5))
        board = Board.initial()
        assert p.choose_move(board) in legal_moves(board, Color.BLACK)

    def test_choose_move_none_without_moves(self) -> None:
        p = AIPlayer(Color.BLACK, Difficulty.MEDIUM)
        assert p.choose_move(board_from_placement("8/8/8/8/8/8/8/4K3")) is None
