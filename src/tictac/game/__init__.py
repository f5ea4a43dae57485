"""Game management layer: controller, players, settings, phase FSM.

Quick start::

    from tictac.core import GameConfig, Mark
    from tictac.game import GameController

    ctrl = GameController()
    ctrl.new_game(GameConfig(opponent_is_heuristic=True, human_mark=Mark.X))
    ctrl.submit_human_move(4)  # the opponent answers immediately
"""

from tictac.game.controller import GameController, GameEvents
from tictac.game.interfaces import GamePhase, IGameController, IPlayer
from tictac.game.player import AIPlayer, HumanPlayer
from tictac.game.settings import AppSettings
from tictac.game.status import status_text, turn_text

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    "IPlayer",
    # Concrete
    "AIPlayer",
    "AppSettings",
    "GameController",
    "GameEvents",
    "HumanPlayer",
    # Text
    "status_text",
    "turn_text",
]
