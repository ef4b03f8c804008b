"""GameSession: interaction state around the pure engine.

Owns what the engine deliberately does not: the current board, whose turn
it is, whether a game is running, and the selected square with its
highlighted destinations. Emits events via simple callbacks so a UI or
tests can subscribe.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from dataclasses import dataclass, field

from chesslite.config import GameMode, GameSettings
from chesslite.core.board import Board
from chesslite.core.enums import Color
from chesslite.core.move import Move
from chesslite.core.move_generator import apply_move, legal_moves
from chesslite.core.rules import is_legal
from chesslite.core.types import Square
from chesslite.game.interfaces import GameEndReason, GamePhase, IPlayer
from chesslite.game.player import AIPlayer, HumanPlayer

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, Board], None]  # move, board after the move
PhaseCallback = Callable[[GamePhase], None]
GameOverCallback = Callable[[GameEndReason], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


def _players_for(
    settings: GameSettings, rng: random.Random | None
) -> dict[Color, IPlayer]:
    players: dict[Color, IPlayer] = {
        Color.WHITE: HumanPlayer(Color.WHITE),
        Color.BLACK: HumanPlayer(Color.BLACK),
    }
    if settings.mode == GameMode.VS_COMPUTER:
        color = settings.computer_color
        players[color] = AIPlayer(color, settings.difficulty, rng)
    return players


class GameSession:
    """Runs one game at a time: start, clicks, computer turns, resignation.

    Thread-safety: call from a single thread (the UI thread). Computer moves
    chosen elsewhere come back through :meth:`submit_move`.
    """

    __slots__ = (
        "_settings",
        "_players",
        "_board",
        "_side_to_move",
        "_phase",
        "_selected",
        "_highlights",
        "_end_reason",
        "_no_moves_for",
        "events",
    )

    def __init__(
        self,
        settings: GameSettings | None = None,
        *,
        players: dict[Color, IPlayer] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._settings = settings or GameSettings()
        self._settings.validate()
        self._players = players or _players_for(self._settings, rng)
        self._board = Board.initial()
        self._side_to_move = Color.WHITE
        self._phase = GamePhase.NOT_STARTED
        self._selected: Square | None = None
        self._highlights: list[Square] = []
        self._end_reason: GameEndReason | None = None
        self._no_moves_for: Color | None = None
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def settings(self) -> GameSettings:
        return self._settings

    @property
    def board(self) -> Board:
        return self._board

    @property
    def side_to_move(self) -> Color:
        return self._side_to_move

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def is_active(self) -> bool:
        return self._phase in (GamePhase.AWAITING_MOVE, GamePhase.THINKING)

    @property
    def selected(self) -> Square | None:
        return self._selected

    @property
    def highlights(self) -> list[Square]:
        return list(self._highlights)

    @property
    def end_reason(self) -> GameEndReason | None:
        return self._end_reason

    @property
    def no_moves_for(self) -> Color | None:
        """Side that was left without a legal move, if that ended the game."""
        return self._no_moves_for

    @property
    def current_player(self) -> IPlayer:
        return self._players[self._side_to_move]

    def player(self, color: Color) -> IPlayer:
        return self._players[color]

    # ── Lifecycle ────────────────────────────────────────────────────────

    def start(self) -> None:
        """Reset to the initial position with white to move."""
        self._board = Board.initial()
        self._side_to_move = Color.WHITE
        self._clear_selection()
        self._end_reason = None
        self._no_moves_for = None
        _LOGGER.info("New game (%s)", self._settings.mode.value)
        self._prompt_current_player()

    def resign(self) -> None:
        if not self.is_active:
            return
        self._clear_selection()
        _LOGGER.info("%s resigned", self._side_to_move)
        self._end(GameEndReason.RESIGNED)

    # ── Moves ────────────────────────────────────────────────────────────

    def click(self, row: int, col: int) -> bool:
        """Handle a click on (row, col). Returns True iff a move was played.

        First click selects one of the mover's pieces and highlights its
        destinations; the second click either deselects (same square) or
        attempts the move, and clears the selection either way.
        """
        if not self.is_active or not self.current_player.is_human:
            return False

        if self._selected is not None:
            from_row, from_col = self._selected
            if (from_row, from_col) == (row, col):
                self._clear_selection()
                return False
            moved = self.submit_move(Move(from_row, from_col, row, col))
            self._clear_selection()
            return moved

        piece = self._board.piece_at(row, col)
        if piece is not None and piece.color == self._side_to_move:
            self._selected = (row, col)
            self._highlights = [
                move.to_square
                for move in legal_moves(self._board, self._side_to_move, row, col)
            ]
        return False

    def submit_move(self, move: Move) -> bool:
        """Play *move* for the side to move if it is legal."""
        if not self.is_active:
            return False

        piece = self._board.piece_at(move.from_row, move.from_col)
        if piece is None or piece.color != self._side_to_move:
            return False
        if not is_legal(
            self._board, move.from_row, move.from_col, move.to_row, move.to_col
        ):
            return False

        self._board = apply_move(self._board, move)
        _LOGGER.debug("%s played %s", self._side_to_move, move)
        self._side_to_move = self._side_to_move.opposite
        self._clear_selection()

        for cb in self.events.on_move:
            cb(move, self._board)

        self._prompt_current_player()
        return True

    def play_computer_move(self) -> Move | None:
        """Let the computer player to move choose and play synchronously.

        Returns the move played, or None if it is not the computer's turn or
        the computer has no legal move (which ends the game).
        """
        if not self.is_active or self.current_player.is_human:
            return None

        move = self.current_player.choose_move(self._board)
        if move is None:
            self.report_no_moves()
            return None
        self.submit_move(move)
        return move

    def report_no_moves(self) -> None:
        """End the game because the side to move has no legal move."""
        if not self.is_active:
            return
        self._no_moves_for = self._side_to_move
        _LOGGER.info("%s has no legal moves", self._side_to_move)
        self._end(GameEndReason.NO_LEGAL_MOVES)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _clear_selection(self) -> None:
        self._selected = None
        self._highlights = []

    def _prompt_current_player(self) -> None:
        if self.current_player.is_human:
            self._set_phase(GamePhase.AWAITING_MOVE)
        else:
            self._set_phase(GamePhase.THINKING)

    def _end(self, reason: GameEndReason) -> None:
        self._end_reason = reason
        self._set_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(reason)

    def _set_phase(self, phase: GamePhase) -> None:
        self._phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)
