"""Tests for outcome evaluation."""

import itertools

import pytest

from tictac.core.board import Board
from tictac.core.enums import Mark, OutcomeKind
from tictac.core.rules import Outcome, Rules, evaluate
from tictac.core.types import LINES


class TestEvaluate:
    def test_empty_board_in_progress(self) -> None:
        assert evaluate(Board.empty()) == Outcome.in_progress()

    def test_full_board_without_line_is_draw(self) -> None:
        outcome = evaluate(Board.from_string("XOXXOOOXX"))
        assert outcome.kind == OutcomeKind.DRAW
        assert outcome.winner is None
        assert outcome.line is None

    def test_top_row_win(self) -> None:
        outcome = evaluate(Board.from_string("XXXOO...."))
        assert outcome == Outcome.won(Mark.X, (0, 1, 2))

    @pytest.mark.parametrize("line", LINES)
    def test_every_line_wins(self, line: tuple[int, int, int]) -> None:
        board = Board.empty()
        for sq in line:
            board = board.with_mark(sq, Mark.O)
        outcome = evaluate(board)
        assert outcome.is_won
        assert outcome.winner == Mark.O
        assert outcome.line == line

    def test_full_board_with_line_is_win_not_draw(self) -> None:
        outcome = evaluate(Board.from_string("XXXOOXXOO"))
        assert outcome.is_won
        assert not outcome.is_draw

    def test_first_line_in_canonical_order_reported(self) -> None:
        # Unreachable in play, but the scan order still decides.
        board = Board.from_string("XXXX..X..")
        assert evaluate(board).line == (0, 1, 2)

    def test_mixed_line_is_not_a_win(self) -> None:
        assert evaluate(Board.from_string("XXO......")).kind == OutcomeKind.IN_PROGRESS

    def test_swapping_marks_swaps_winner(self) -> None:
        # A spread of boards sampled from all 3^9 cell assignments.
        for cells in itertools.islice(
            itertools.product((None, Mark.X, Mark.O), repeat=9), 0, None, 37
        ):
            board = Board(cells)
            assert evaluate(board.swapped()) == evaluate(board).swapped()


class TestOutcome:
    def test_terminal_flags(self) -> None:
        assert not Outcome.in_progress().is_terminal
        assert Outcome.draw().is_terminal
        assert Outcome.won(Mark.X, (0, 1, 2)).is_terminal

    def test_won_and_draw_exclusive(self) -> None:
        won = Outcome.won(Mark.O, (2, 4, 6))
        assert won.is_won and not won.is_draw
        draw = Outcome.draw()
        assert draw.is_draw and not draw.is_won

    def test_swapped_draw_unchanged(self) -> None:
        assert Outcome.draw().swapped() == Outcome.draw()


class TestRules:
    def test_winner_and_line(self) -> None:
        board = Board.from_string("O..O..O..")
        assert Rules.winner(board) == Mark.O
        assert Rules.winning_line(board) == (0, 3, 6)

    def test_is_draw(self) -> None:
        assert Rules.is_draw(Board.from_string("XOXXOOOXX"))
        assert not Rules.is_draw(Board.empty())

    def test_wins_with(self) -> None:
        board = Board.from_string("XX.OO....")
        assert Rules.wins_with(board, 2, Mark.X)
        assert not Rules.wins_with(board, 2, Mark.O)
        assert Rules.wins_with(board, 5, Mark.O)
