"""Tests for Board and square helpers."""

import pytest

from tictac.core.board import Board
from tictac.core.enums import Mark
from tictac.core.types import (
    CORNERS,
    LINES,
    SIDES,
    col_of,
    is_valid_square,
    make_square,
    row_of,
)


class TestSquares:
    def test_coordinates_round_trip(self) -> None:
        for sq in range(9):
            assert make_square(row_of(sq), col_of(sq)) == sq

    def test_make_square_rejects_out_of_grid(self) -> None:
        with pytest.raises(ValueError):
            make_square(3, 0)

    def test_valid_square_bounds(self) -> None:
        assert is_valid_square(0)
        assert is_valid_square(8)
        assert not is_valid_square(-1)
        assert not is_valid_square(9)

    def test_valid_square_rejects_non_ints(self) -> None:
        assert not is_valid_square(True)
        assert not is_valid_square(4.0)
        assert not is_valid_square("4")
        assert not is_valid_square(None)

    def test_line_order(self) -> None:
        assert LINES[:3] == ((0, 1, 2), (3, 4, 5), (6, 7, 8))
        assert LINES[3:6] == ((0, 3, 6), (1, 4, 7), (2, 5, 8))
        assert LINES[6:] == ((0, 4, 8), (2, 4, 6))

    def test_corners_and_sides_partition_the_rim(self) -> None:
        assert sorted(CORNERS + SIDES + (4,)) == list(range(9))


class TestBoard:
    def test_empty_board(self) -> None:
        board = Board.empty()
        assert len(board) == 9
        assert board.empty_squares() == list(range(9))
        assert not board.is_full()

    def test_wrong_length_rejected(self) -> None:
        with pytest.raises(ValueError):
            Board([None] * 8)

    def test_zero_length_rejected(self) -> None:
        with pytest.raises(ValueError):
            Board([])

    def test_default_is_empty(self) -> None:
        assert Board() == Board.empty()
        assert Board().empty_squares() == list(range(9))

    def test_invalid_cell_rejected(self) -> None:
        with pytest.raises(ValueError):
            Board(["X"] + [None] * 8)

    def test_from_string(self) -> None:
        board = Board.from_string("XX_OO____")
        assert board[0] == Mark.X
        assert board[1] == Mark.X
        assert board[2] is None
        assert board[3] == Mark.O
        assert board.empty_squares() == [2, 5, 6, 7, 8]

    def test_from_string_accepts_rendered_rows(self) -> None:
        board = Board.from_string("XO.\n.X.\n..O")
        assert board == Board.from_string("XO..X...O")

    def test_from_string_bad_char(self) -> None:
        with pytest.raises(ValueError):
            Board.from_string("XXZ......")

    def test_with_mark_returns_new_board(self) -> None:
        board = Board.empty()
        after = board.with_mark(4, Mark.X)
        assert board.is_empty(4)
        assert after[4] == Mark.X

    def test_with_mark_occupied_raises(self) -> None:
        board = Board.from_string("X........")
        with pytest.raises(ValueError):
            board.with_mark(0, Mark.O)

    def test_with_mark_out_of_range_raises(self) -> None:
        with pytest.raises(ValueError):
            Board.empty().with_mark(9, Mark.O)

    def test_swapped(self) -> None:
        board = Board.from_string("XO.......")
        assert board.swapped() == Board.from_string("OX.......")

    def test_count_and_full(self) -> None:
        board = Board.from_string("XOXXOOOXX")
        assert board.is_full()
        assert board.count(Mark.X) == 5
        assert board.count(Mark.O) == 4

    def test_str_renders_rows(self) -> None:
        assert str(Board.from_string("XO..X...O")) == "XO.\n.X.\n..O"

    def test_hashable(self) -> None:
        assert len({Board.empty(), Board.empty()}) == 1


class TestMark:
    def test_opposite(self) -> None:
        assert Mark.X.opposite == Mark.O
        assert Mark.O.opposite == Mark.X

    def test_str(self) -> None:
        assert str(Mark.O) == "O"

    def test_parse(self) -> None:
        assert Mark.parse("x") == Mark.X
        with pytest.raises(ValueError):
            Mark.parse("Z")
