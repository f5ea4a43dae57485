"""Board - mark placement on a 3x3 grid."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from tictac.core.enums import Mark
from tictac.core.types import BOARD_SIZE, SQUARE_COUNT, Square, is_valid_square

Cell = Mark | None

_EMPTY_CHARS = frozenset("._- ")


class Board:
    """Immutable 9-cell board. Every placement returns a new instance."""

    __slots__ = ("_cells",)

    def __init__(self, cells: Iterable[Cell] | None = None) -> None:
        cells = (None,) * SQUARE_COUNT if cells is None else tuple(cells)
        if len(cells) != SQUARE_COUNT:
            raise ValueError(f"Board needs {SQUARE_COUNT} cells, got {len(cells)}")
        for cell in cells:
            if cell is not None and not isinstance(cell, Mark):
                raise ValueError(f"Invalid cell value: {cell!r}")
        self._cells: tuple[Cell, ...] = cells

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def from_string(cls, text: str) -> Board:
        """Parse a compact board such as ``"XX.OO...."``.

        ``.``, ``_``, ``-`` and spaces are empty cells; ``|`` and newlines
        are ignored so rendered boards can be read back.
        """
        cells: list[Cell] = []
        for ch in text:
            if ch in "|\n\r":
                continue
            if ch in _EMPTY_CHARS:
                cells.append(None)
            else:
                cells.append(Mark.parse(ch))
        return cls(cells)

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Cell:
        return self._cells[sq]

    def __len__(self) -> int:
        return SQUARE_COUNT

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(self._cells)

    @property
    def cells(self) -> tuple[Cell, ...]:
        return self._cells

    def is_empty(self, sq: Square) -> bool:
        return self._cells[sq] is None

    # -- Query helpers ------------------------------------------------------

    def empty_squares(self) -> list[Square]:
        """Indices of empty cells in ascending order."""
        return [sq for sq, cell in enumerate(self._cells) if cell is None]

    def is_full(self) -> bool:
        return all(cell is not None for cell in self._cells)

    def count(self, mark: Mark) -> int:
        return sum(1 for cell in self._cells if cell == mark)

    # -- Derivation ---------------------------------------------------------

    def with_mark(self, sq: Square, mark: Mark) -> Board:
        """Return a copy with *mark* placed on *sq*."""
        if not is_valid_square(sq):
            raise ValueError(f"Square out of range: {sq!r}")
        if self._cells[sq] is not None:
            raise ValueError(f"Square {sq} is already occupied")
        cells = list(self._cells)
        cells[sq] = mark
        return Board(cells)

    def swapped(self) -> Board:
        """Return a copy with X and O exchanged."""
        return Board(None if cell is None else cell.opposite for cell in self._cells)

    # -- Display ------------------------------------------------------------

    def to_string(self) -> str:
        return "".join("." if cell is None else str(cell) for cell in self._cells)

    def __str__(self) -> str:
        flat = self.to_string()
        rows = [flat[i : i + BOARD_SIZE] for i in range(0, SQUARE_COUNT, BOARD_SIZE)]
        return "\n".join(rows)

    def __repr__(self) -> str:
        return f"Board({self.to_string()!r})"
