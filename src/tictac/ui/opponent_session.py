"""Opponent decision scheduling for the main UI thread.

The core never waits; this session adds the "thinking" pause, runs the
selector on a worker thread and hands the answer back to the controller.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from typing import Protocol

from PyQt6.QtCore import QObject, QThread, QTimer, pyqtSignal

from tictac.core.board import Board
from tictac.core.enums import Mark
from tictac.core.state import GameState
from tictac.engine.heuristic import HeuristicSelector
from tictac.engine.qt_bridge import SelectorWorker
from tictac.engine.search import RandomSource, SelectionRule
from tictac.game.controller import GameController
from tictac.game.interfaces import GamePhase
from tictac.game.player import AIPlayer
from tictac.game.settings import AppSettings

_LOGGER = logging.getLogger(__name__)


class SelectorRequestSignal(Protocol):
    """Minimal signal interface used by :class:`OpponentSession`."""

    def connect(self, slot: Callable[..., object]) -> object: ...

    def emit(
        self,
        board_obj: object,
        self_mark: object,
        opponent_mark: object,
        request_id: int,
    ) -> object: ...


class _SelectorRequestBus(QObject):
    """Signal bridge for issuing worker requests with queued delivery."""

    move_requested = pyqtSignal(object, object, object, int)


class OpponentSession:
    """Owns worker-thread selection lifecycle and move handoff to controller.

    While a request is pending the controller sits in
    :attr:`GamePhase.THINKING`, which is what locks human input.
    """

    __slots__ = (
        "__weakref__",
        "_controller",
        "_settings",
        "_rng",
        "_selector_request",
        "_request_bus",
        "_sync_board_interactivity",
        "_think_timer",
        "_worker_thread",
        "_worker",
        "_fallback",
        "_request_id",
        "_pending_request",
        "_pending_board",
        "_pending_mark",
        "_is_shutting_down",
        "_is_started",
    )

    def __init__(
        self,
        *,
        controller: GameController,
        settings: AppSettings | None = None,
        selector_request: SelectorRequestSignal | None = None,
        sync_board_interactivity: Callable[[], None] | None = None,
        rng: RandomSource | None = None,
        parent: QObject | None = None,
    ) -> None:
        self._controller = controller
        self._settings = settings or AppSettings()
        self._rng: RandomSource = rng if rng is not None else random.Random(self._settings.seed)
        self._sync_board_interactivity = sync_board_interactivity or (lambda: None)

        self._request_bus = _SelectorRequestBus(parent)
        self._selector_request: SelectorRequestSignal = (
            selector_request or self._request_bus.move_requested
        )

        self._think_timer = QTimer(parent)
        self._think_timer.setSingleShot(True)
        self._think_timer.timeout.connect(self._emit_pending_request)

        self._worker_thread = QThread(parent)
        self._worker = SelectorWorker(HeuristicSelector(seed=self._settings.seed))
        self._fallback = HeuristicSelector(seed=self._settings.seed)

        self._request_id = 0
        self._pending_request: int | None = None
        self._pending_board: Board | None = None
        self._pending_mark: Mark | None = None
        self._is_shutting_down = False
        self._is_started = False

    # ── Lifecycle ────────────────────────────────────────────────────────

    def setup(self) -> None:
        """Start the worker thread and route heuristic seats through it."""
        if self._is_started:
            return
        self._is_shutting_down = False
        self._worker.moveToThread(self._worker_thread)
        self._selector_request.connect(self._worker.request_move)
        self._worker.move_ready.connect(self._on_move_ready)
        self._worker.no_move.connect(self._on_no_move)
        self._worker.selection_error.connect(self._on_selection_error)
        self._worker_thread.start()
        self._controller.set_ai_player_factory(self.create_ai_player)
        self._is_started = True

    def shutdown(self) -> None:
        """Drop any pending decision and stop the worker thread."""
        if not self._is_started:
            return
        self._is_shutting_down = True
        self.cancel()
        self._controller.set_ai_player_factory(None)
        self._worker_thread.quit()
        self._worker_thread.wait(2000)
        self._is_started = False

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def is_pending(self) -> bool:
        return self._pending_request is not None

    def think_delay_ms(self) -> int:
        """Pause before the next request: base delay plus random jitter."""
        jitter = self._rng.random() * self._settings.think_jitter_ms
        return self._settings.think_delay_ms + int(jitter)

    def create_ai_player(self, mark: Mark) -> AIPlayer:
        """Create an opponent wired to this session."""
        return AIPlayer(
            mark,
            on_request_move=self.request_move,
            on_cancel=self.cancel,
        )

    def request_move(self, state: GameState) -> None:
        """Schedule a decision for the side to move in *state*."""
        if not self._is_started or self._is_shutting_down:
            return
        self.cancel()

        self._request_id += 1
        self._pending_request = self._request_id
        self._pending_board = state.board
        self._pending_mark = state.current_mark
        self._think_timer.start(self.think_delay_ms())

    def cancel(self) -> None:
        """Forget the pending decision; a late reply is then ignored."""
        self._think_timer.stop()
        self._clear_pending_request()

    # ── Worker replies ───────────────────────────────────────────────────

    def _emit_pending_request(self) -> None:
        if self._is_shutting_down:
            return
        request_id = self._pending_request
        board = self._pending_board
        mark = self._pending_mark
        if request_id is None or board is None or mark is None:
            return
        self._selector_request.emit(board, mark, mark.opposite, request_id)

    def _on_move_ready(self, request_id: int, index: int, rule: int) -> None:
        if not self._is_current_reply(request_id):
            return
        _LOGGER.debug("Opponent chose %d via %s", index, SelectionRule(rule).name)
        self._clear_pending_request()
        self._controller.submit_move(index)
        self._sync_board_interactivity()

    def _on_no_move(self, request_id: int) -> None:
        if not self._is_current_reply(request_id):
            return
        _LOGGER.warning("Opponent found no move on %r; restarting", self._pending_board)
        self._clear_pending_request()
        self._controller.restart()
        self._sync_board_interactivity()

    def _on_selection_error(self, request_id: int, message: str) -> None:
        if not self._is_current_reply(request_id):
            return
        _LOGGER.warning("Opponent worker failed (%s); selecting in-thread", message)
        board = self._pending_board
        mark = self._pending_mark
        self._clear_pending_request()
        if board is None or mark is None:
            return
        selection = self._fallback.select(board, mark, mark.opposite)
        if selection is not None:
            self._controller.submit_move(selection.index)
        self._sync_board_interactivity()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _is_current_reply(self, request_id: int) -> bool:
        if self._is_shutting_down:
            return False
        if request_id != self._pending_request:
            return False
        if self._controller.phase != GamePhase.THINKING:
            self._clear_pending_request()
            return False
        if self._controller.state.board != self._pending_board:
            self._clear_pending_request()
            return False
        return True

    def _clear_pending_request(self) -> None:
        self._pending_request = None
        self._pending_board = None
        self._pending_mark = None
