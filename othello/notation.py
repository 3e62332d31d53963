"""
Move notation - two-character human move strings.

A move is written as one digit row (0-7) followed by one letter column
(A-H, case-insensitive): ``3D`` is row 3, column 3. The same notation is
used for human input, Q-table keys and move history.
"""

from typing import Optional, Tuple

BOARD_SIZE = 8
ROW_DIGITS = "01234567"
COLUMN_LETTERS = "ABCDEFGH"


def notation_to_coordinates(notation: str) -> Optional[Tuple[int, int]]:
    """Parse ``'3D'`` into ``(3, 3)``. Returns None for anything malformed."""
    if not isinstance(notation, str) or len(notation) != 2:
        return None
    row_char, col_char = notation[0], notation[1].upper()
    if row_char not in ROW_DIGITS or col_char not in COLUMN_LETTERS:
        return None
    return ROW_DIGITS.index(row_char), COLUMN_LETTERS.index(col_char)


def coordinates_to_notation(row: int, col: int) -> Optional[str]:
    """Format ``(3, 3)`` as ``'3D'``. Returns None when out of range."""
    if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
        return None
    return f"{row}{COLUMN_LETTERS[col]}"
