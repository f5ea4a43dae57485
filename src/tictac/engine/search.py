"""Shared move-selection models and protocol."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Protocol, TypeVar

if TYPE_CHECKING:
    from tictac.core.board import Board
    from tictac.core.enums import Mark

_T = TypeVar("_T")


class RandomSource(Protocol):
    """Anything with ``random.Random.choice`` / ``random`` semantics."""

    def choice(self, seq: Sequence[_T]) -> _T: ...

    def random(self) -> float: ...


class SelectionRule(IntEnum):
    """Which priority rule produced a selection, highest priority first."""

    WIN = 1
    BLOCK = 2
    CENTER = 3
    CORNER = 4
    SIDE = 5


@dataclass(slots=True, frozen=True)
class Selection:
    """A chosen square and the rule that chose it."""

    index: int
    rule: SelectionRule


class IMoveSelector(Protocol):
    """Protocol for opponents used by the game layer."""

    def select(
        self,
        board: Board,
        self_mark: Mark,
        opponent_mark: Mark,
    ) -> Selection | None: ...
