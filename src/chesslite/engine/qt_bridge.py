"""Qt bridge: run computer move selection behind a "thinking" delay."""

from __future__ import annotations

import logging
import random
import threading

from PyQt6.QtCore import QObject, QThread, QTimer, pyqtSignal, pyqtSlot

from chesslite.config import GameSettings
from chesslite.core.board import Board
from chesslite.core.enums import Color
from chesslite.core.move import Move
from chesslite.engine.selector import Difficulty, select_move

_LOGGER = logging.getLogger(__name__)


class EngineWorker(QObject):
    """Thread-affine worker that computes computer moves on demand."""

    move_ready = pyqtSignal(int, object)
    no_move = pyqtSignal(int)
    search_cancelled = pyqtSignal(int)
    search_error = pyqtSignal(int, str)

    __slots__ = ("_cancel_event", "_difficulty", "_rng", "_select_move")

    def __init__(
        self,
        *,
        difficulty: Difficulty = Difficulty.MEDIUM,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__()
        self._difficulty = difficulty
        self._rng = rng
        self._select_move = select_move
        self._cancel_event = threading.Event()

    @property
    def difficulty(self) -> Difficulty:
        return self._difficulty

    @pyqtSlot(object, object, int)
    def request_move(self, board_obj: object, color_obj: object, request_id: int) -> None:
        """Select a move for *color_obj* on *board_obj* and emit the outcome."""
        if not isinstance(board_obj, Board) or not isinstance(color_obj, Color):
            _LOGGER.warning("Engine request %d received invalid arguments", request_id)
            self.search_error.emit(request_id, "Engine received invalid board or side")
            return

        self._cancel_event.clear()
        try:
            move = self._select_move(board_obj, color_obj, self._difficulty, self._rng)
        except Exception as exc:
            _LOGGER.warning("Engine request %d failed: %s", request_id, exc)
            self.search_error.emit(request_id, str(exc))
            return

        if self._cancel_event.is_set():
            self.search_cancelled.emit(request_id)
            return

        if move is None:
            self.no_move.emit(request_id)
            return

        self.move_ready.emit(request_id, move)

    @pyqtSlot()
    def cancel(self) -> None:
        """Flag the current request as cancelled."""
        self._cancel_event.set()

    @pyqtSlot(str)
    def set_difficulty(self, name: str) -> None:
        """Change the tier used from the next request on."""
        self._difficulty = Difficulty.parse(name)


class ComputerTurn(QObject):
    """Schedules one computer move after a single-shot thinking delay.

    The worker lives on its own ``QThread`` and receives requests through a
    queued signal, so a search never blocks the GUI thread. Only the latest
    request is honoured: :meth:`cancel` (e.g. when the human resigns while
    the computer thinks) or a new :meth:`start` make any earlier result
    stale, and stale results are dropped. Call :meth:`shutdown` before
    discarding the object.
    """

    move_ready = pyqtSignal(object)
    no_move = pyqtSignal()
    failed = pyqtSignal(str)

    _move_requested = pyqtSignal(object, object, int)

    def __init__(
        self,
        worker: EngineWorker | None = None,
        *,
        think_delay_ms: int = 600,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._worker = worker or EngineWorker()
        self._think_delay_ms = max(0, think_delay_ms)
        self._request_id = 0
        self._pending: tuple[Board, Color] | None = None
        self._awaiting_result = False

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._dispatch)

        self._thread = QThread(self)
        self._worker.moveToThread(self._thread)
        self._move_requested.connect(self._worker.request_move)
        self._worker.move_ready.connect(self._on_move_ready)
        self._worker.no_move.connect(self._on_no_move)
        self._worker.search_cancelled.connect(self._on_cancelled)
        self._worker.search_error.connect(self._on_error)
        self._thread.start()

    @classmethod
    def from_settings(
        cls,
        settings: GameSettings,
        *,
        rng: random.Random | None = None,
        parent: QObject | None = None,
    ) -> ComputerTurn:
        """Build a turn using the chosen difficulty and thinking delay."""
        settings.validate()
        worker = EngineWorker(difficulty=settings.difficulty, rng=rng)
        return cls(worker, think_delay_ms=settings.think_delay_ms, parent=parent)

    @property
    def worker(self) -> EngineWorker:
        return self._worker

    @property
    def think_delay_ms(self) -> int:
        return self._think_delay_ms

    @property
    def is_pending(self) -> bool:
        return self._pending is not None or self._awaiting_result

    def set_think_delay(self, delay_ms: int) -> None:
        self._think_delay_ms = max(0, delay_ms)

    def start(self, board: Board, color: Color) -> int:
        """Schedule a move for *color*; returns the request id."""
        self._timer.stop()
        self._request_id += 1
        self._pending = (board, color)
        self._awaiting_result = False
        self._timer.start(self._think_delay_ms)
        return self._request_id

    def cancel(self) -> None:
        """Drop the pending request, if any."""
        if not self.is_pending:
            return
        self._timer.stop()
        self._request_id += 1
        self._pending = None
        self._awaiting_result = False
        # Direct call; a queued cancel would wait behind the running search.
        self._worker.cancel()
        _LOGGER.debug("Computer move cancelled")

    def shutdown(self) -> None:
        """Cancel any request and stop the worker thread."""
        self.cancel()
        self._thread.quit()
        if not self._thread.wait(2000):
            _LOGGER.warning("Engine thread did not stop within 2s")

    def _dispatch(self) -> None:
        if self._pending is None:
            return
        board, color = self._pending
        self._pending = None
        self._awaiting_result = True
        self._move_requested.emit(board, color, self._request_id)

    def _is_current(self, request_id: int) -> bool:
        return self._awaiting_result and request_id == self._request_id

    @pyqtSlot(int, object)
    def _on_move_ready(self, request_id: int, move: Move) -> None:
        if not self._is_current(request_id):
            return
        self._awaiting_result = False
        self.move_ready.emit(move)

    @pyqtSlot(int)
    def _on_no_move(self, request_id: int) -> None:
        if not self._is_current(request_id):
            return
        self._awaiting_result = False
        self.no_move.emit()

    @pyqtSlot(int)
    def _on_cancelled(self, request_id: int) -> None:
        _LOGGER.debug("Engine request %d finished after cancellation", request_id)

    @pyqtSlot(int, str)
    def _on_error(self, request_id: int, message: str) -> None:
        if not self._is_current(request_id):
            return
        self._awaiting_result = False
        self.failed.emit(message)
