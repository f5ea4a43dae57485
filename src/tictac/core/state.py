"""Game state values: configuration, snapshot and move result."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from tictac.core.board import Board
from tictac.core.enums import Mark, MoveError
from tictac.core.rules import Outcome
from tictac.core.types import Square


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Seating for a game: who supplies moves for which mark."""

    opponent_is_heuristic: bool = False
    human_mark: Mark = Mark.X

    @property
    def heuristic_mark(self) -> Mark | None:
        """Mark played by the heuristic opponent, if there is one."""
        if not self.opponent_is_heuristic:
            return None
        return self.human_mark.opposite

    def is_heuristic_turn(self, mark: Mark) -> bool:
        return self.heuristic_mark == mark


@dataclass(frozen=True, slots=True)
class GameState:
    """Immutable snapshot of a game.

    ``outcome`` is always the evaluation of ``board``; transitions compute it
    when they produce the state.
    """

    board: Board = field(default_factory=Board.empty)
    current_mark: Mark = Mark.X
    outcome: Outcome = field(default_factory=Outcome.in_progress)

    @property
    def is_game_over(self) -> bool:
        return self.outcome.is_terminal

    @property
    def ply_count(self) -> int:
        """Number of marks placed so far."""
        return len(self.board) - len(self.board.empty_squares())

    def legal_moves(self) -> list[Square]:
        """Squares the side to move may play; empty once the game is over."""
        if self.is_game_over:
            return []
        return self.board.empty_squares()


@dataclass(frozen=True, slots=True)
class MoveResult:
    """State after a move attempt, plus the rejection reason if any."""

    state: GameState
    error: MoveError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __iter__(self) -> Iterator[GameState | MoveError | None]:
        yield self.state
        yield self.error
