"""Seats at the board: the human at the UI and the heuristic opponent.

Besides routing move requests, a seat knows how to talk about itself in
the status line, so the controller never has to branch on the game mode
to phrase a result.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from tictac.game.interfaces import IPlayer

if TYPE_CHECKING:
    from tictac.core.enums import Mark
    from tictac.core.state import GameState


class _Seat(IPlayer):
    """Mark and display name shared by both kinds of seat."""

    __slots__ = ("_mark", "_name")

    def __init__(self, mark: Mark, name: str) -> None:
        self._mark = mark
        self._name = name

    @property
    def mark(self) -> Mark:
        return self._mark

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._mark}, {self._name!r})"


class HumanPlayer(_Seat):
    """A human clicking cells; ``request_move`` waits for the UI.

    Facing the heuristic opponent the seat is addressed as "You";
    in a two-player game each seat is "Player X" / "Player O" and a
    win is announced by mark.
    """

    __slots__ = ("_against_opponent",)

    def __init__(self, mark: Mark, name: str = "", *, against_opponent: bool = False) -> None:
        default = "You" if against_opponent else f"Player {mark}"
        super().__init__(mark, name or default)
        self._against_opponent = against_opponent

    @property
    def is_human(self) -> bool:
        return True

    def win_text(self) -> str:
        if self._against_opponent:
            return "You win!"
        return super().win_text()

    def request_move(self, state: GameState) -> None:
        pass  # clicks arrive via controller.submit_human_move()

    def cancel(self) -> None:
        pass


class AIPlayer(_Seat):
    """The heuristic opponent; the decision itself is delegated.

    The controller's default wires *on_request_move* to a synchronous
    selector, the Qt session to a delayed worker request.

    Args:
        mark: Mark the opponent plays.
        name: Display name, used in "<name> wins!" and
            "<name> is thinking...".
        on_request_move: ``(GameState) -> None``, called when the
            controller asks the opponent to move.
        on_cancel: ``() -> None``, called to drop a pending decision.
    """

    __slots__ = ("_on_request_move", "_on_cancel")

    def __init__(
        self,
        mark: Mark,
        name: str = "AI",
        on_request_move: Callable[[GameState], None] | None = None,
        on_cancel: Callable[[], None] | None = None,
    ) -> None:
        super().__init__(mark, name)
        self._on_request_move = on_request_move
        self._on_cancel = on_cancel

    @property
    def is_human(self) -> bool:
        return False

    def win_text(self) -> str:
        return f"{self._name} wins!"

    def turn_text(self, *, thinking: bool = False) -> str:
        if thinking:
            return f"{self._name} is thinking..."
        return super().turn_text()

    def request_move(self, state: GameState) -> None:
        if self._on_request_move is not None:
            self._on_request_move(state)

    def cancel(self) -> None:
        if self._on_cancel is not None:
            self._on_cancel()
