"""
Cell - The tri-state occupant of a board square.

A square is either empty or holds a disc of one of the two playable
colors. Values are stored directly in the board's numpy grid, so the
enum is an IntEnum whose integers double as the grid encoding:

- EMPTY: 0
- BLACK: 1 (moves first)
- WHITE: 2
"""

from enum import IntEnum


class Cell(IntEnum):
    EMPTY = 0
    BLACK = 1
    WHITE = 2

    def opponent(self) -> 'Cell':
        """The other playable color. EMPTY has no opponent and maps to itself."""
        if self == Cell.BLACK:
            return Cell.WHITE
        if self == Cell.WHITE:
            return Cell.BLACK
        return Cell.EMPTY

    @property
    def symbol(self) -> str:
        return CELL_SYMBOLS[self]

    def __str__(self) -> str:
        if self == Cell.EMPTY:
            return "*"
        return self.name

    def __format__(self, format_spec: str) -> str:
        # IntEnum would otherwise format as the bare integer
        return format(str(self), format_spec)


# Single-character symbols used by the renderer and Board.from_rows
CELL_SYMBOLS = {
    Cell.EMPTY: '*',
    Cell.BLACK: 'B',
    Cell.WHITE: 'W',
}

PLAYABLE_COLORS = (Cell.BLACK, Cell.WHITE)
