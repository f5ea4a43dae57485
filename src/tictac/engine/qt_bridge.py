"""Qt bridge to run move selection in a worker thread."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from tictac.core.board import Board
from tictac.core.enums import Mark
from tictac.engine.heuristic import HeuristicSelector
from tictac.engine.search import IMoveSelector


class SelectorWorker(QObject):
    """Thread-affine worker that computes opponent moves on demand."""

    move_ready = pyqtSignal(int, int, int)  # request_id, square, rule
    no_move = pyqtSignal(int)
    selection_error = pyqtSignal(int, str)

    def __init__(self, selector: IMoveSelector | None = None) -> None:
        super().__init__()
        self._selector: IMoveSelector = selector or HeuristicSelector()

    @pyqtSlot(object, object, object, int)
    def request_move(
        self,
        board_obj: object,
        self_mark: object,
        opponent_mark: object,
        request_id: int,
    ) -> None:
        """Select a square on *board_obj* for *self_mark* and emit it."""
        if not isinstance(board_obj, Board):
            self.selection_error.emit(request_id, "Selector received invalid board")
            return
        if not isinstance(self_mark, Mark) or not isinstance(opponent_mark, Mark):
            self.selection_error.emit(request_id, "Selector received invalid mark")
            return

        try:
            selection = self._selector.select(board_obj, self_mark, opponent_mark)
        except Exception as exc:
            self.selection_error.emit(request_id, str(exc))
            return

        if selection is None:
            self.no_move.emit(request_id)
            return

        self.move_ready.emit(request_id, selection.index, int(selection.rule))
