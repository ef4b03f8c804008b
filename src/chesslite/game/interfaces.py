"""Abstract interfaces for the game layer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from chesslite.core.enums import Color

if TYPE_CHECKING:
    from chesslite.core.board import Board
    from chesslite.core.move import Move


class GamePhase(IntEnum):
    """Finite-state-machine states for a game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    THINKING = auto()  # computer is choosing
    GAME_OVER = auto()


class IPlayer(ABC):
    """A participant in the game (human or computer)."""

    @property
    @abstractmethod
    def color(self) -> Color: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def choose_move(self, board: Board) -> Move | None:
        """Return a move for a computer player; humans return None."""


class GameEndReason(IntEnum):
    """Why a game stopped."""

    RESIGNED = auto()
    NO_LEGAL_MOVES = auto()
