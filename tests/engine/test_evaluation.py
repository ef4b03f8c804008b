"""Tests for the material evaluator."""

from chesslite.core.board import Board
from chesslite.core.move import Move
from chesslite.core.notation import board_from_placement
from chesslite.engine.evaluation import PIECE_VALUES, capture_value, evaluate


class TestEvaluate:
    def test_initial_position_is_balanced(self) -> None:
        assert evaluate(Board.initial()) == 0

    def test_empty_board(self) -> None:
        assert evaluate(Board.empty()) == 0

    def test_black_material_is_positive(self) -> None:
        assert evaluate(board_from_placement("8/8/8/3q4/8/8/8/8")) == 9

    def test_white_material_is_negative(self) -> None:
        assert evaluate(board_from_placement("8/8/8/8/8/8/8/R7")) == -5

    def test_kings_cancel(self) -> None:
        assert evaluate(board_from_placement("4k3/8/8/8/8/8/8/4K3")) == 0

    def test_king_outweighs_everything(self) -> None:
        board = board_from_placement("4k3/8/8/8/8/8/PPPPPPPP/RNBQ1BNR")
        assert evaluate(board) == 1000 - (8 + 2 * 5 + 2 * 3 + 2 * 3 + 9)

    def test_piece_values_table(self) -> None:
        assert sorted(PIECE_VALUES.values()) == [1, 3, 3, 5, 9, 1000]


class TestCaptureValue:
    def test_quiet_move_scores_zero(self) -> None:
        assert capture_value(Board.initial(), Move(6, 4, 4, 4)) == 0

    def test_capture_scores_target_value(self) -> None:
        board = board_from_placement("8/8/8/3q3R/8/8/8/8")
        assert capture_value(board, Move(3, 3, 3, 7)) == 5
        assert capture_value(board, Move(3, 7, 3, 3)) == 9
