"""Status-line and turn-indicator text for a session."""

from __future__ import annotations

from tictac.core.rules import Outcome
from tictac.core.state import GameConfig, GameState


def status_text(outcome: Outcome, config: GameConfig) -> str:
    """Headline describing the result, phrased for the human seat."""
    if outcome.is_won:
        if not config.opponent_is_heuristic:
            return f"Winner: {outcome.winner}"
        if outcome.winner == config.human_mark:
            return "You win!"
        return "AI wins!"
    if outcome.is_draw:
        return "Draw game!"
    return "Game in progress"


def turn_text(state: GameState, config: GameConfig, *, thinking: bool = False) -> str:
    """Whose move it is; empty once the game is over."""
    if state.is_game_over:
        return ""
    if thinking and config.is_heuristic_turn(state.current_mark):
        return "AI is thinking..."
    return f"Turn: {state.current_mark}"
