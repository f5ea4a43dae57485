"""Abstract interfaces for the game layer.

The controller depends on these ABCs, not on concrete player
implementations, so a Qt-backed opponent and a synchronous one are
interchangeable.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tictac.core.enums import Mark, MoveError
    from tictac.core.state import GameConfig, GameState


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a session."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    THINKING = auto()  # opponent is choosing
    GAME_OVER = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IPlayer(ABC):
    """Interface for a game participant (human or heuristic)."""

    @property
    @abstractmethod
    def mark(self) -> Mark: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def request_move(self, state: GameState) -> None:
        """Begin the move-selection process.

        For humans this is a no-op (they interact via UI).
        For the opponent this answers now or schedules an answer.
        """

    @abstractmethod
    def cancel(self) -> None:
        """Drop a pending decision (opponent only, no-op for human)."""

    def win_text(self) -> str:
        """Status line once this seat has completed a line."""
        return f"Winner: {self.mark}"

    def turn_text(self, *, thinking: bool = False) -> str:
        """Turn indicator while this seat is to move."""
        return f"Turn: {self.mark}"


class IGameController(ABC):
    """Interface for the session orchestrator."""

    @abstractmethod
    def new_game(
        self,
        config: GameConfig | None = None,
        x_player: IPlayer | None = None,
        o_player: IPlayer | None = None,
    ) -> None:
        """Set up a new game."""

    @abstractmethod
    def submit_move(self, index: int) -> MoveError | None:
        """Submit a move. Returns the rejection reason, or None if applied."""

    @abstractmethod
    def restart(self) -> None:
        """Start over with the current configuration."""

    @abstractmethod
    def apply_config(self, config: GameConfig) -> bool:
        """Adopt *config*; returns True if that reset the game."""
