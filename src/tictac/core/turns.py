"""Turn manager: pure transitions over :class:`GameState`.

Every function takes a state and returns a new one; nothing here mutates
its input, so a game can be replayed from any snapshot.
"""

from __future__ import annotations

import logging

from tictac.core.enums import MoveError
from tictac.core.rules import evaluate
from tictac.core.state import GameConfig, GameState, MoveResult
from tictac.core.types import is_valid_square

_LOGGER = logging.getLogger(__name__)


def create_game(config: GameConfig | None = None) -> GameState:
    """Fresh state: empty board, X to move, game in progress.

    *config* decides who supplies moves, not what the board looks like,
    so it does not influence the returned state.
    """
    return GameState()


def reset(config: GameConfig | None = None) -> GameState:
    """Discard any prior state and start over."""
    return create_game(config)


def apply_move(state: GameState, index: int) -> MoveResult:
    """Place the side to move's mark on *index*.

    Rejections return the input *state* untouched together with the reason.
    """
    if not is_valid_square(index):
        _LOGGER.debug("Rejected move %r: out of range", index)
        return MoveResult(state, MoveError.OUT_OF_RANGE)

    if not state.board.is_empty(index):
        _LOGGER.debug("Rejected move %d: square occupied", index)
        return MoveResult(state, MoveError.ALREADY_OCCUPIED)

    if state.is_game_over:
        _LOGGER.debug("Rejected move %d: game is over", index)
        return MoveResult(state, MoveError.GAME_OVER)

    board = state.board.with_mark(index, state.current_mark)
    outcome = evaluate(board)
    next_mark = state.current_mark if outcome.is_terminal else state.current_mark.opposite
    return MoveResult(GameState(board=board, current_mark=next_mark, outcome=outcome))
