"""
Board - Canonical 8x8 Othello state and the capture rule engine.

Handles:
- Legal-move tests (run of opposite discs closed by an own disc)
- Move application with disc flipping
- Disc counts and cached per-color legal-move counts
- Turn order, including forced passes
- Deterministic state keys for the Q-table

The grid is a numpy int8 array holding Cell values. Legal-move sets for a
whole color are computed with shifted boolean masks; single placements are
validated by tracing each of the eight lines from the played square.
"""

import logging
from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np

from othello.cell import Cell, PLAYABLE_COLORS
from othello.errors import OutOfBounds, OccupiedCell, InvalidColor, NoCapturingLine
from othello.notation import BOARD_SIZE

logger = logging.getLogger(__name__)

# (d_row, d_col) for the eight lines through a square
DIRECTIONS = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
]

TOTAL_CELLS = BOARD_SIZE * BOARD_SIZE

# Row-string characters accepted by Board.from_rows
ROW_CHARS = {
    '.': Cell.EMPTY, '*': Cell.EMPTY, '-': Cell.EMPTY,
    'B': Cell.BLACK, 'X': Cell.BLACK,
    'W': Cell.WHITE, 'O': Cell.WHITE,
}


def _shift(mask: np.ndarray, d_row: int, d_col: int) -> np.ndarray:
    """Move every True in ``mask`` by (d_row, d_col), dropping what falls off."""
    n = BOARD_SIZE
    out = np.zeros_like(mask)
    out[max(d_row, 0):n + min(d_row, 0), max(d_col, 0):n + min(d_col, 0)] = \
        mask[max(-d_row, 0):n + min(-d_row, 0), max(-d_col, 0):n + min(-d_col, 0)]
    return out


def _check_color(color) -> Cell:
    if color not in PLAYABLE_COLORS:
        raise InvalidColor(color)
    return Cell(color)


class Board:
    """
    Othello board state.

    Invariant: black discs + white discs + empty cells == 64. A square goes
    from EMPTY to a color once and afterwards only changes color.
    """

    def __init__(self):
        self.cells = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
        low, high = BOARD_SIZE // 2 - 1, BOARD_SIZE // 2
        self.cells[low, low] = Cell.WHITE
        self.cells[low, high] = Cell.BLACK
        self.cells[high, low] = Cell.BLACK
        self.cells[high, high] = Cell.WHITE

        self.disc_counts: Dict[Cell, int] = {Cell.BLACK: 2, Cell.WHITE: 2}
        self.move_number = 1
        self.side_to_move = Cell.BLACK
        # None means "no legal move", distinct from an unknown count
        self._legal_counts: Dict[Cell, Optional[int]] = {}
        self._refresh_legal_counts()

    @classmethod
    def from_rows(cls, rows: Iterable[str], side_to_move: Cell = Cell.BLACK,
                  move_number: int = 1) -> 'Board':
        """
        Build a board from eight row strings such as ``"...WB..."``.

        ``.``/``*``/``-`` are empty, ``B``/``X`` black, ``W``/``O`` white.
        """
        rows = [row.replace(" ", "") for row in rows]
        if len(rows) != BOARD_SIZE or any(len(r) != BOARD_SIZE for r in rows):
            raise ValueError(f"Expected {BOARD_SIZE} rows of {BOARD_SIZE} cells")

        board = cls.__new__(cls)
        board.cells = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
        for r, row in enumerate(rows):
            for c, char in enumerate(row.upper()):
                if char not in ROW_CHARS:
                    raise ValueError(f"Unknown cell character {char!r} at ({r}, {c})")
                board.cells[r, c] = ROW_CHARS[char]

        board.disc_counts = {
            color: int(np.count_nonzero(board.cells == color))
            for color in PLAYABLE_COLORS
        }
        board.move_number = move_number
        board.side_to_move = _check_color(side_to_move)
        board._legal_counts = {}
        board._refresh_legal_counts()
        return board

    def copy(self) -> 'Board':
        """Independent copy for hypothetical branches."""
        clone = Board.__new__(Board)
        clone.cells = self.cells.copy()
        clone.disc_counts = dict(self.disc_counts)
        clone.move_number = self.move_number
        clone.side_to_move = self.side_to_move
        clone._legal_counts = dict(self._legal_counts)
        return clone

    # ── Reading ────────────────────────────────────────────────────────

    @staticmethod
    def in_bounds(row: int, col: int) -> bool:
        return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE

    def get_cell(self, row: int, col: int) -> Cell:
        if not self.in_bounds(row, col):
            raise OutOfBounds(row, col)
        return Cell(int(self.cells[row, col]))

    def disc_count(self, color: Cell) -> int:
        return self.disc_counts[_check_color(color)]

    def empty_count(self) -> int:
        return int(np.count_nonzero(self.cells == Cell.EMPTY))

    def legal_move_count(self, color: Cell) -> Optional[int]:
        """Cached number of legal moves for ``color``, or None when it has none."""
        return self._legal_counts[_check_color(color)]

    def state_key(self) -> str:
        """64 characters of 0/1/2 in row-major order. Depends on cells only."""
        return "".join(map(str, self.cells.ravel().tolist()))

    # ── Rules ──────────────────────────────────────────────────────────

    def _run_length(self, row: int, col: int, color: Cell,
                    d_row: int, d_col: int) -> int:
        """Opposite discs captured along one line from (row, col), 0 if none."""
        opponent = color.opponent()
        r, c = row + d_row, col + d_col
        run = 0
        while 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE:
            cell = self.cells[r, c]
            if cell == opponent:
                run += 1
            elif cell == color:
                return run
            else:
                return 0
            r += d_row
            c += d_col
        return 0

    def _capturing_lines(self, row: int, col: int,
                         color) -> List[Tuple[int, int, int]]:
        """Validate a placement and return (d_row, d_col, run) per capturing line."""
        if not self.in_bounds(row, col):
            raise OutOfBounds(row, col)
        if self.cells[row, col] != Cell.EMPTY:
            raise OccupiedCell(row, col)
        color = _check_color(color)

        lines = []
        for d_row, d_col in DIRECTIONS:
            run = self._run_length(row, col, color, d_row, d_col)
            if run > 0:
                lines.append((d_row, d_col, run))
        if not lines:
            raise NoCapturingLine(row, col, color)
        return lines

    def can_play(self, row: int, col: int, color: Cell) -> List[Tuple[int, int]]:
        """Capturing directions for a placement. Raises InvalidMove or OutOfBounds."""
        return [(d_row, d_col)
                for d_row, d_col, _ in self._capturing_lines(row, col, color)]

    def is_legal(self, row: int, col: int, color: Cell) -> bool:
        if not self.in_bounds(row, col) or color not in PLAYABLE_COLORS:
            return False
        if self.cells[row, col] != Cell.EMPTY:
            return False
        color = Cell(color)
        return any(self._run_length(row, col, color, d_row, d_col) > 0
                   for d_row, d_col in DIRECTIONS)

    def _legal_mask(self, color: Cell) -> np.ndarray:
        """Boolean grid of every square where ``color`` may play."""
        own = self.cells == color
        opp = self.cells == color.opponent()
        empty = self.cells == Cell.EMPTY

        moves = np.zeros_like(own)
        for d_row, d_col in DIRECTIONS:
            # Opposite discs reached from an own disc, extended one step at a time.
            run = _shift(own, d_row, d_col) & opp
            if not run.any():
                continue
            for _ in range(BOARD_SIZE - 3):
                run |= _shift(run, d_row, d_col) & opp
            moves |= _shift(run, d_row, d_col) & empty
        return moves

    def legal_moves(self, color: Cell) -> Optional[List[Tuple[int, int]]]:
        """Row-major legal placements for ``color``, or None when there are none."""
        color = _check_color(color)
        coords = np.argwhere(self._legal_mask(color))
        if len(coords) == 0:
            return None
        return [(int(r), int(c)) for r, c in coords]

    def _refresh_legal_counts(self):
        for color in PLAYABLE_COLORS:
            count = int(np.count_nonzero(self._legal_mask(color)))
            self._legal_counts[color] = count if count > 0 else None

    def apply(self, row: int, col: int, color: Cell) -> int:
        """
        Place a disc and flip every captured line.

        Returns the discs gained (flipped + 1). Raises an InvalidMove subclass
        or OutOfBounds before touching the board.
        """
        lines = self._capturing_lines(row, col, color)
        color = Cell(color)
        opponent = color.opponent()

        self.cells[row, col] = color
        flipped = 0
        for d_row, d_col, run in lines:
            for step in range(1, run + 1):
                self.cells[row + d_row * step, col + d_col * step] = color
            flipped += run

        self.disc_counts[color] += 1 + flipped
        self.disc_counts[opponent] -= flipped
        self._refresh_legal_counts()
        return flipped + 1

    # ── Turn order ─────────────────────────────────────────────────────

    def next_turn(self) -> bool:
        """
        End the current turn and hand the move over.

        Returns True when the opponent had no legal move and was forced to
        pass; the same side then moves again. A pass advances the move counter.
        """
        self.move_number += 1
        opponent = self.side_to_move.opponent()
        if self._legal_counts[opponent] is not None or self.is_game_over():
            self.side_to_move = opponent
            return False

        self.move_number += 1
        logger.debug(f"{opponent} has no legal move and passes "
                     f"(move {self.move_number - 1})")
        return True

    def pass_turn(self):
        """The side to move passes without placing a disc."""
        self.move_number += 1
        self.side_to_move = self.side_to_move.opponent()

    def is_game_over(self) -> bool:
        return (self._legal_counts[Cell.BLACK] is None
                and self._legal_counts[Cell.WHITE] is None)

    def winner(self) -> Optional[Cell]:
        """Color with strictly more discs, or None on a tie."""
        black = self.disc_counts[Cell.BLACK]
        white = self.disc_counts[Cell.WHITE]
        if black > white:
            return Cell.BLACK
        if white > black:
            return Cell.WHITE
        return None

    def __repr__(self) -> str:
        return (f"Board(move={self.move_number}, to_move={self.side_to_move.name}, "
                f"black={self.disc_counts[Cell.BLACK]}, "
                f"white={self.disc_counts[Cell.WHITE]})")
