"""Tests for status and turn text."""

from tictac.core.board import Board
from tictac.core.enums import Mark
from tictac.core.rules import Outcome, evaluate
from tictac.core.state import GameConfig, GameState
from tictac.game.status import status_text, turn_text

_HH = GameConfig()
_VS_AI = GameConfig(opponent_is_heuristic=True, human_mark=Mark.O)


class TestStatusText:
    def test_in_progress(self) -> None:
        assert status_text(Outcome.in_progress(), _HH) == "Game in progress"

    def test_draw(self) -> None:
        assert status_text(Outcome.draw(), _VS_AI) == "Draw game!"

    def test_two_player_winner(self) -> None:
        assert status_text(Outcome.won(Mark.O, (0, 4, 8)), _HH) == "Winner: O"

    def test_human_wins(self) -> None:
        assert status_text(Outcome.won(Mark.O, (0, 4, 8)), _VS_AI) == "You win!"

    def test_ai_wins(self) -> None:
        assert status_text(Outcome.won(Mark.X, (0, 4, 8)), _VS_AI) == "AI wins!"


class TestTurnText:
    def test_turn(self) -> None:
        assert turn_text(GameState(), _HH) == "Turn: X"

    def test_thinking_only_on_ai_turn(self) -> None:
        state = GameState()  # X to move, AI plays X
        assert turn_text(state, _VS_AI, thinking=True) == "AI is thinking..."
        o_turn = GameState(current_mark=Mark.O)
        assert turn_text(o_turn, _VS_AI, thinking=True) == "Turn: O"

    def test_empty_when_over(self) -> None:
        board = Board.from_string("XXXOO....")
        state = GameState(board=board, current_mark=Mark.X, outcome=evaluate(board))
        assert turn_text(state, _HH) == ""
