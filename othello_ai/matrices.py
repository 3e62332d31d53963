"""
Heuristic Matrices - Positional weight tables for the MATRIX evaluator.

Two fixed 8x8 tables. Corners are worth the most, the squares diagonally
next to a corner (X-squares) are the most dangerous to occupy. Both tables
are symmetric about the horizontal and vertical center lines.
"""

from enum import Enum

import numpy as np


def _mirror(top_half) -> np.ndarray:
    """Build a read-only 8x8 table from its top four rows."""
    table = np.array(top_half + top_half[::-1], dtype=np.int64)
    table.setflags(write=False)
    return table


MATRIX_A = _mirror([
    [100, -20, 10, 5, 5, 10, -20, 100],
    [-20, -50, -2, -2, -2, -2, -50, -20],
    [10, -2, -1, -1, -1, -1, -2, 10],
    [5, -2, -1, -1, -1, -1, -2, 5],
])

MATRIX_B = _mirror([
    [500, -150, 30, 10, 10, 30, -150, 500],
    [-150, -250, 0, 0, 0, 0, -250, -150],
    [30, 0, 1, 2, 2, 1, 0, 30],
    [10, 0, 2, 16, 16, 2, 0, 10],
])


class HeuristicMatrix(Enum):
    A = "A"
    B = "B"

    @property
    def weights(self) -> np.ndarray:
        return _TABLES[self]

    def next(self) -> 'HeuristicMatrix':
        members = list(HeuristicMatrix)
        return members[(members.index(self) + 1) % len(members)]

    def previous(self) -> 'HeuristicMatrix':
        members = list(HeuristicMatrix)
        return members[(members.index(self) - 1) % len(members)]


_TABLES = {
    HeuristicMatrix.A: MATRIX_A,
    HeuristicMatrix.B: MATRIX_B,
}
