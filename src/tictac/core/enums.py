"""Core enumerations for the noughts-and-crosses domain."""

from __future__ import annotations

from enum import IntEnum


class Mark(IntEnum):
    """Token a player places on the board."""

    X = 0
    O = 1

    @property
    def opposite(self) -> Mark:
        return Mark(1 - self.value)

    def __str__(self) -> str:
        return self.name

    @classmethod
    def parse(cls, text: str) -> Mark:
        """Parse ``"X"`` / ``"O"`` (case-insensitive)."""
        try:
            return cls[text.strip().upper()]
        except KeyError:
            raise ValueError(f"Invalid mark: {text!r}") from None


class OutcomeKind(IntEnum):
    """Evaluated status of a board."""

    IN_PROGRESS = 0
    WON = 1
    DRAW = 2


class MoveError(IntEnum):
    """Reasons a move is rejected. Always returned, never raised."""

    OUT_OF_RANGE = 1
    ALREADY_OCCUPIED = 2
    GAME_OVER = 3
