"""Qt-side session helpers.

Call :meth:`OpponentSession.setup` before starting a game so heuristic
seats are built by the session instead of the synchronous default.
"""

from tictac.ui.opponent_session import OpponentSession

__all__ = ["OpponentSession"]
