"""
Errors raised by the Othello rule engine and the strategies built on it.

Having no legal move is a normal game state and is represented by
``None`` from ``Board.legal_moves``, never by an exception.
"""


class OthelloError(Exception):
    """Base class for all Othello errors."""


class OutOfBounds(OthelloError, IndexError):
    """A row or column index lies outside the 8x8 grid."""

    def __init__(self, row: int, col: int):
        super().__init__(f"Index out of bounds: ({row}, {col})")
        self.row = row
        self.col = col


class InvalidMove(OthelloError):
    """A placement that the rules forbid. The board is left unchanged."""


class OccupiedCell(InvalidMove):
    def __init__(self, row: int, col: int):
        super().__init__(f"Cell ({row}, {col}) is not empty")
        self.row = row
        self.col = col


class InvalidColor(InvalidMove):
    def __init__(self, color):
        super().__init__(f"Invalid color: {color!r}")
        self.color = color


class NoCapturingLine(InvalidMove):
    def __init__(self, row: int, col: int, color):
        super().__init__(
            f"Placing {color} at ({row}, {col}) captures nothing")
        self.row = row
        self.col = col
        self.color = color


class TableImportError(OthelloError):
    """A Q-table source is missing or malformed."""


class ConcurrencyFailure(OthelloError):
    """A forked subtree evaluation terminated abnormally."""
