"""
Heuristics - Static evaluation of a board from one color's point of view.

- ABSOLUTE: disc difference
- MATRIX: positional weights of the squares held
- MOBILITY: legal-move difference
- MIXED: MATRIX in the opening, MOBILITY in the midgame, ABSOLUTE at the end
- GLOBAL: ABSOLUTE + MATRIX + MOBILITY

All evaluators are read-only and return plain ints.
"""

from enum import Enum

import numpy as np

from othello.board import Board
from othello.cell import Cell
from othello_ai.matrices import HeuristicMatrix

# Move counter thresholds for the MIXED heuristic phases
OPENING_END = 20
MIDGAME_END = 40


def absolute_score(board: Board, color: Cell) -> int:
    return board.disc_count(color) - board.disc_count(color.opponent())


def matrix_score(board: Board, color: Cell, matrix: HeuristicMatrix) -> int:
    return int(np.sum(matrix.weights[board.cells == color]))


def mobility_score(board: Board, color: Cell) -> int:
    own = board.legal_move_count(color) or 0
    other = board.legal_move_count(color.opponent()) or 0
    return own - other


class Heuristic(Enum):
    ABSOLUTE = "absolute"
    MATRIX = "matrix"
    MOBILITY = "mobility"
    MIXED = "mixed"
    GLOBAL = "global"

    @property
    def uses_matrix(self) -> bool:
        return self not in (Heuristic.ABSOLUTE, Heuristic.MOBILITY)

    def next(self) -> 'Heuristic':
        members = list(Heuristic)
        return members[(members.index(self) + 1) % len(members)]

    def previous(self) -> 'Heuristic':
        members = list(Heuristic)
        return members[(members.index(self) - 1) % len(members)]

    def evaluate(self, board: Board, color: Cell,
                 matrix: HeuristicMatrix = HeuristicMatrix.A) -> int:
        return evaluate(board, color, self, matrix)


def evaluate(board: Board, color: Cell, heuristic: Heuristic,
             matrix: HeuristicMatrix = HeuristicMatrix.A) -> int:
    """Score ``board`` for ``color``. Higher is better for ``color``."""
    if heuristic == Heuristic.ABSOLUTE:
        return absolute_score(board, color)
    if heuristic == Heuristic.MATRIX:
        return matrix_score(board, color, matrix)
    if heuristic == Heuristic.MOBILITY:
        return mobility_score(board, color)
    if heuristic == Heuristic.MIXED:
        if board.move_number < OPENING_END:
            return matrix_score(board, color, matrix)
        if board.move_number < MIDGAME_END:
            return mobility_score(board, color)
        return absolute_score(board, color)
    if heuristic == Heuristic.GLOBAL:
        return (absolute_score(board, color)
                + matrix_score(board, color, matrix)
                + mobility_score(board, color))
    raise ValueError(f"Unknown heuristic: {heuristic!r}")
