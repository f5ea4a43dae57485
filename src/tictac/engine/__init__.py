"""Opponent package: heuristic move selection.

The Qt worker lives in :mod:`tictac.engine.qt_bridge` and is not imported
here, so the selector stays usable without PyQt6 loaded.
"""

from tictac.engine.heuristic import HeuristicSelector, choose_move, select_move
from tictac.engine.search import IMoveSelector, RandomSource, Selection, SelectionRule

__all__ = [
    "HeuristicSelector",
    "IMoveSelector",
    "RandomSource",
    "Selection",
    "SelectionRule",
    "choose_move",
    "select_move",
]
