"""User-configurable session settings."""

from __future__ import annotations

from dataclasses import dataclass

from tictac.core.enums import Mark
from tictac.core.state import GameConfig


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Seating
    opponent_is_heuristic: bool = False
    human_mark: Mark = Mark.X

    # Opponent pacing: delay before the selector runs is
    # think_delay_ms + uniform(0, think_jitter_ms).
    think_delay_ms: int = 600
    think_jitter_ms: int = 500

    # Tie-break seed for corner/side picks; None for a fresh seed.
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.think_delay_ms < 0 or self.think_jitter_ms < 0:
            raise ValueError("Think delays must be non-negative")

    def to_config(self) -> GameConfig:
        return GameConfig(
            opponent_is_heuristic=self.opponent_is_heuristic,
            human_mark=self.human_mark,
        )
