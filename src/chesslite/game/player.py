"""Concrete player implementations."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

from chesslite.core.enums import Color
from chesslite.engine.selector import Difficulty, select_move
from chesslite.game.interfaces import IPlayer

if TYPE_CHECKING:
    from chesslite.core.board import Board
    from chesslite.core.move import Move


class HumanPlayer(IPlayer):
    """A human participant; moves come from board clicks.

    ``choose_move`` always answers None because humans pick interactively.
    """

    __slots__ = ("_color", "_name")

    def __init__(self, color: Color, name: str = "") -> None:
        self._color = color
        self._name = name or f"Player ({color})"

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True

    def choose_move(self, board: Board) -> Move | None:
        return None


class AIPlayer(IPlayer):
    """A computer participant backed by :func:`select_move`.

    Args:
        color: Side the AI plays.
        difficulty: Selection tier.
        rng: Random source for the easy/medium tiers.
        name: Display name.
    """

    __slots__ = ("_color", "_difficulty", "_rng", "_name")

    def __init__(
        self,
        color: Color,
        difficulty: Difficulty = Difficulty.MEDIUM,
        rng: random.Random | None = None,
        name: str = "Computer",
    ) -> None:
        self._color = color
        self._difficulty = difficulty
        self._rng = rng
        self._name = name

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    @property
    def difficulty(self) -> Difficulty:
        return self._difficulty

    def choose_move(self, board: Board) -> Move | None:
        return select_move(board, self._color, self._difficulty, self._rng)
