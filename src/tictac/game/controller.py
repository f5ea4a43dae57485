"""GameController: the central orchestrator of a session.

Coordinates: Players, GameState, the turn manager and the default opponent.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field

from tictac.core.enums import Mark, MoveError
from tictac.core.rules import Outcome
from tictac.core.state import GameConfig, GameState
from tictac.core.turns import apply_move, create_game, reset
from tictac.core.types import is_valid_square
from tictac.engine.heuristic import HeuristicSelector
from tictac.engine.search import IMoveSelector
from tictac.game.interfaces import GamePhase, IGameController, IPlayer
from tictac.game.player import AIPlayer, HumanPlayer
from tictac.game.status import status_text, turn_text

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[int, Mark, GameState], None]  # index, mover, state
GameOverCallback = Callable[[Outcome], None]
PhaseCallback = Callable[[GamePhase], None]
NewGameCallback = Callable[[GameState], None]
AIPlayerFactory = Callable[[Mark], IPlayer]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)
    on_new_game: list[NewGameCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Owns the authoritative state of one session.

    Thread-safety: all mutations hold a re-entrant lock, so concurrent
    ``submit_move`` calls against one controller are applied one at a time.
    The lock is re-entrant because a synchronous opponent answers from
    inside the prompt that follows a move.

    Args:
        config: Initial seating; human vs human when omitted.
        selector: Opponent policy used by the default heuristic seat.
        ai_player_factory: ``(Mark) -> IPlayer`` building the heuristic
            seat; overrides the synchronous default.
    """

    __slots__ = (
        "_state",
        "_config",
        "_phase",
        "_players",
        "_selector",
        "_ai_player_factory",
        "_lock",
        "events",
    )

    def __init__(
        self,
        config: GameConfig | None = None,
        *,
        selector: IMoveSelector | None = None,
        ai_player_factory: AIPlayerFactory | None = None,
    ) -> None:
        self._config = config or GameConfig()
        self._state = create_game(self._config)
        self._phase = GamePhase.NOT_STARTED
        self._players: dict[Mark, IPlayer] = {}
        self._selector: IMoveSelector = selector or HeuristicSelector()
        self._ai_player_factory = ai_player_factory
        self._lock = threading.RLock()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._state.current_mark)

    def player(self, mark: Mark) -> IPlayer | None:
        return self._players.get(mark)

    def set_ai_player_factory(self, factory: AIPlayerFactory | None) -> None:
        """Use *factory* for heuristic seats of subsequent games."""
        self._ai_player_factory = factory

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(
        self,
        config: GameConfig | None = None,
        x_player: IPlayer | None = None,
        o_player: IPlayer | None = None,
    ) -> None:
        with self._lock:
            if config is not None:
                self._config = config
            self._cancel_thinking()
            self._players = {
                Mark.X: x_player or self._default_player(Mark.X),
                Mark.O: o_player or self._default_player(Mark.O),
            }
            self._start_fresh()

    def submit_move(self, index: int) -> MoveError | None:
        with self._lock:
            mover = self._state.current_mark
            state, error = apply_move(self._state, index)
            if error is not None:
                return error
            self._state = state

            self._emit_move(index, mover)

            if state.is_game_over:
                _LOGGER.info("Game over: %s", self.status_text())
                self._set_phase(GamePhase.GAME_OVER)
                self._emit_game_over(state.outcome)
                return None

            self._prompt_current_player()
            return None

    def submit_human_move(self, index: int) -> bool:
        """Apply a move that came from user input.

        Input is locked while the opponent is thinking and once the game
        is over; a locked or illegal click returns False and changes nothing.
        """
        with self._lock:
            if self._phase != GamePhase.AWAITING_MOVE:
                return False
            cp = self.current_player
            if cp is None or not cp.is_human:
                return False
            return self.submit_move(index) is None

    def restart(self) -> None:
        with self._lock:
            self._cancel_thinking()
            self._start_fresh()

    def apply_config(self, config: GameConfig) -> bool:
        # A seating change always discards the game in progress; there is
        # no confirmation step here, callers that want one must ask first.
        with self._lock:
            if config == self._config and self._phase != GamePhase.NOT_STARTED:
                return False
            self.new_game(config)
            return True

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_thinking(self) -> bool:
        return self._phase == GamePhase.THINKING

    def is_cell_enabled(self, index: int) -> bool:
        """Can the user click *index* right now?"""
        if self._phase != GamePhase.AWAITING_MOVE:
            return False
        if not is_valid_square(index):
            return False
        return self._state.board.is_empty(index)

    def status_text(self) -> str:
        """Result headline, phrased by the winning seat when there is one."""
        outcome = self._state.outcome
        winner = self._players.get(outcome.winner) if outcome.is_won else None
        if winner is not None:
            return winner.win_text()
        return status_text(outcome, self._config)

    def turn_text(self) -> str:
        cp = self.current_player
        if cp is None or self._state.is_game_over:
            return turn_text(self._state, self._config, thinking=self.is_thinking)
        return cp.turn_text(thinking=self.is_thinking)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _default_player(self, mark: Mark) -> IPlayer:
        if not self._config.is_heuristic_turn(mark):
            return HumanPlayer(mark, against_opponent=self._config.opponent_is_heuristic)
        if self._ai_player_factory is not None:
            return self._ai_player_factory(mark)
        return AIPlayer(mark, on_request_move=self._answer_with_selector)

    def _answer_with_selector(self, state: GameState) -> None:
        """Synchronous opponent: choose and submit immediately."""
        mark = state.current_mark
        selection = self._selector.select(state.board, mark, mark.opposite)
        if selection is None:
            _LOGGER.warning("Opponent %s found no move on %r", mark, state.board)
            return
        self.submit_move(selection.index)

    def _start_fresh(self) -> None:
        self._state = reset(self._config)
        _LOGGER.info(
            "New game: heuristic=%s human=%s",
            self._config.opponent_is_heuristic,
            self._config.human_mark,
        )
        for cb in self.events.on_new_game:
            cb(self._state)
        self._set_phase(GamePhase.AWAITING_MOVE)
        self._prompt_current_player()

    def _cancel_thinking(self) -> None:
        if self._phase != GamePhase.THINKING:
            return
        cp = self.current_player
        if cp is not None and not cp.is_human:
            cp.cancel()

    def _prompt_current_player(self) -> None:
        """Ask the current player to move."""
        cp = self.current_player
        if cp is None or cp.is_human:
            self._set_phase(GamePhase.AWAITING_MOVE)
            return
        self._set_phase(GamePhase.THINKING)
        cp.request_move(self._state)

    def _set_phase(self, phase: GamePhase) -> None:
        if phase == self._phase:
            return
        self._phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)

    def _emit_move(self, index: int, mover: Mark) -> None:
        for cb in self.events.on_move:
            cb(index, mover, self._state)

    def _emit_game_over(self, outcome: Outcome) -> None:
        for cb in self.events.on_game_over:
            cb(outcome)
