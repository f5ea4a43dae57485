"""Outcome evaluation: win and draw detection."""

from __future__ import annotations

from dataclasses import dataclass

from tictac.core.board import Board
from tictac.core.enums import Mark, OutcomeKind
from tictac.core.types import LINES, Line


@dataclass(frozen=True, slots=True)
class Outcome:
    """Status of a board: in progress, won along a line, or drawn."""

    kind: OutcomeKind
    winner: Mark | None = None
    line: Line | None = None

    @classmethod
    def in_progress(cls) -> Outcome:
        return cls(OutcomeKind.IN_PROGRESS)

    @classmethod
    def won(cls, mark: Mark, line: Line) -> Outcome:
        return cls(OutcomeKind.WON, mark, line)

    @classmethod
    def draw(cls) -> Outcome:
        return cls(OutcomeKind.DRAW)

    @property
    def is_won(self) -> bool:
        return self.kind == OutcomeKind.WON

    @property
    def is_draw(self) -> bool:
        return self.kind == OutcomeKind.DRAW

    @property
    def is_terminal(self) -> bool:
        return self.kind != OutcomeKind.IN_PROGRESS

    def swapped(self) -> Outcome:
        """Same outcome with the winner relabelled to the other mark."""
        if self.winner is None:
            return self
        return Outcome(self.kind, self.winner.opposite, self.line)


def evaluate(board: Board) -> Outcome:
    """Evaluate *board*.

    Lines are scanned in canonical order and the first complete one wins.
    A full board with no complete line is a draw.
    """
    for line in LINES:
        a, b, c = line
        mark = board[a]
        if mark is not None and mark == board[b] == board[c]:
            return Outcome.won(mark, line)
    if board.is_full():
        return Outcome.draw()
    return Outcome.in_progress()


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    @staticmethod
    def game_outcome(board: Board) -> Outcome:
        return evaluate(board)

    @staticmethod
    def winner(board: Board) -> Mark | None:
        return evaluate(board).winner

    @staticmethod
    def winning_line(board: Board) -> Line | None:
        return evaluate(board).line

    @staticmethod
    def is_draw(board: Board) -> bool:
        return evaluate(board).is_draw

    @staticmethod
    def wins_with(board: Board, sq: int, mark: Mark) -> bool:
        """Would placing *mark* on empty *sq* win the game for *mark*?"""
        outcome = evaluate(board.with_mark(sq, mark))
        return outcome.is_won and outcome.winner == mark
