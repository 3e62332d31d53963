"""
Player - The capability shared by humans and AI strategies.

The presentation layer only ever calls ``play_turn`` and the getters and
setters below. Players without a given knob (a human has no search depth)
inherit the default no-op implementations.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional, Tuple

from othello.board import Board
from othello.cell import Cell
from othello.errors import InvalidMove, TableImportError
from othello.history import HistoryAction
from othello.notation import coordinates_to_notation

logger = logging.getLogger(__name__)

DEFAULT_DEPTH = 1


class Player(ABC):
    """Base class for anything that can take a turn on a Board."""

    def __init__(self, color: Cell):
        self.color = Cell(color)

    @abstractmethod
    def play_turn(self, board: Board,
                  cell: Optional[Tuple[int, int]] = None) -> HistoryAction:
        """Play one turn for ``self.color`` and return its record."""

    def is_human(self) -> bool:
        return False

    def get_ai_type(self):
        return None

    # Defaults for players without tunable search parameters

    def get_depth(self) -> int:
        return DEFAULT_DEPTH

    def set_depth(self, depth: int):
        pass

    def get_heuristic(self):
        from othello_ai.heuristics import Heuristic
        return Heuristic.ABSOLUTE

    def set_heuristic(self, heuristic):
        pass

    def get_matrix(self):
        from othello_ai.matrices import HeuristicMatrix
        return HeuristicMatrix.A

    def set_matrix(self, matrix):
        pass

    def is_parallel(self) -> bool:
        return False

    def set_parallel(self, parallel: bool):
        pass

    def import_q_table(self, path: str):
        raise TableImportError(f"{type(self).__name__} does not hold a Q-table")

    # Shared turn mechanics

    def check_turn(self, board: Board):
        """Raise InvalidMove unless this player is the side to move."""
        if board.side_to_move != self.color:
            raise InvalidMove(f"Not {self.color}'s turn ({board.side_to_move} to move)")

    def _apply_and_record(self, board: Board, row: int, col: int) -> HistoryAction:
        """Apply a move for this player, end the turn and build the record."""
        move_number = board.move_number
        gained = board.apply(row, col, self.color)
        board.next_turn()
        action = HistoryAction(
            notation=coordinates_to_notation(row, col),
            gained_discs=gained,
            color=self.color,
            next_color=board.side_to_move,
            move_number=move_number,
        )
        logger.debug(f"Played {action}")
        return action

    def _pass(self, board: Board) -> HistoryAction:
        move_number = board.move_number
        board.pass_turn()
        logger.debug(f"{self.color} has no legal move, passing")
        return HistoryAction.forced_pass(self.color, move_number)


class HumanPlayer(Player):
    """A player whose coordinate is chosen outside the engine."""

    def is_human(self) -> bool:
        return True

    def play_turn(self, board: Board,
                  cell: Optional[Tuple[int, int]] = None) -> HistoryAction:
        self.check_turn(board)
        if board.legal_move_count(self.color) is None:
            return self._pass(board)
        if cell is None:
            raise InvalidMove("A human turn requires a chosen cell")
        row, col = cell
        return self._apply_and_record(board, row, col)
