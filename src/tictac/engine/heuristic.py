"""Rule-based opponent: win, block, center, corner, side.

This is a fixed priority policy, not a search; it does not guarantee
optimal play.
"""

from __future__ import annotations

import logging
import random

from tictac.core.board import Board
from tictac.core.enums import Mark
from tictac.core.rules import Rules
from tictac.core.types import CENTER, CORNERS, SIDES, Square
from tictac.engine.search import IMoveSelector, RandomSource, Selection, SelectionRule

_LOGGER = logging.getLogger(__name__)


def _first_winning_square(board: Board, mark: Mark) -> Square | None:
    for sq in board.empty_squares():
        if Rules.wins_with(board, sq, mark):
            return sq
    return None


def choose_move(
    board: Board,
    self_mark: Mark,
    opponent_mark: Mark,
    rng: RandomSource | None = None,
) -> Selection | None:
    """Pick a square for *self_mark* and report which rule fired.

    Returns ``None`` only when the board has no empty square.
    """
    if rng is None:
        rng = random.Random()

    sq = _first_winning_square(board, self_mark)
    if sq is not None:
        return Selection(sq, SelectionRule.WIN)

    sq = _first_winning_square(board, opponent_mark)
    if sq is not None:
        return Selection(sq, SelectionRule.BLOCK)

    if board.is_empty(CENTER):
        return Selection(CENTER, SelectionRule.CENTER)

    corners = [sq for sq in CORNERS if board.is_empty(sq)]
    if corners:
        return Selection(rng.choice(corners), SelectionRule.CORNER)

    sides = [sq for sq in SIDES if board.is_empty(sq)]
    if sides:
        return Selection(rng.choice(sides), SelectionRule.SIDE)

    return None


def select_move(
    board: Board,
    self_mark: Mark,
    opponent_mark: Mark,
    rng: RandomSource | None = None,
) -> Square | None:
    """Index of the chosen empty square, or ``None`` on a full board."""
    selection = choose_move(board, self_mark, opponent_mark, rng)
    return None if selection is None else selection.index


class HeuristicSelector(IMoveSelector):
    """Priority-rule opponent with its own random generator.

    Args:
        seed: Seed for corner/side tie-breaks; ``None`` for a fresh seed.
        rng: Explicit generator, takes precedence over *seed*.
    """

    __slots__ = ("_rng",)

    def __init__(self, seed: int | None = None, rng: RandomSource | None = None) -> None:
        self._rng: RandomSource = rng if rng is not None else random.Random(seed)

    @property
    def rng(self) -> RandomSource:
        return self._rng

    def select(
        self,
        board: Board,
        self_mark: Mark,
        opponent_mark: Mark,
    ) -> Selection | None:
        selection = choose_move(board, self_mark, opponent_mark, self._rng)
        if selection is None:
            _LOGGER.debug("No empty square for %s on %r", self_mark, board)
        else:
            _LOGGER.debug(
                "%s plays %d (%s) on %r",
                self_mark,
                selection.index,
                selection.rule.name,
                board,
            )
        return selection
