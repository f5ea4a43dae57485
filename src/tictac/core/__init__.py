"""Core domain layer: pure game logic with zero external dependencies.

Quick start::

    from tictac.core import GameConfig, apply_move, create_game

    state = create_game(GameConfig())
    state, error = apply_move(state, 4)
    print(state.board)
"""

from tictac.core.board import Board, Cell
from tictac.core.enums import Mark, MoveError, OutcomeKind
from tictac.core.rules import Outcome, Rules, evaluate
from tictac.core.state import GameConfig, GameState, MoveResult
from tictac.core.turns import apply_move, create_game, reset
from tictac.core.types import (
    CENTER,
    CORNERS,
    LINES,
    SIDES,
    Line,
    Square,
    col_of,
    is_valid_square,
    make_square,
    row_of,
)

__all__ = [
    # Enums
    "Mark",
    "MoveError",
    "OutcomeKind",
    # Types / helpers
    "CENTER",
    "CORNERS",
    "LINES",
    "SIDES",
    "Line",
    "Square",
    "col_of",
    "is_valid_square",
    "make_square",
    "row_of",
    # Domain objects
    "Board",
    "Cell",
    "GameConfig",
    "GameState",
    "MoveResult",
    "Outcome",
    "Rules",
    # Operations
    "apply_move",
    "create_game",
    "evaluate",
    "reset",
]
