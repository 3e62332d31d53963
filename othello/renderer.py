"""
Board Renderer - ASCII visualization of an Othello position.

Used by the CLI and for debugging search and training runs.
"""

from othello.board import Board
from othello.cell import Cell
from othello.notation import BOARD_SIZE, COLUMN_LETTERS


class BoardRenderer:
    """ASCII renderer for board state."""

    @staticmethod
    def render(board: Board, show_info: bool = True) -> str:
        """Render the board as a multi-line string."""
        lines = []

        if show_info:
            lines.append(f"Move: {board.move_number}  "
                         f"To move: {board.side_to_move}")
            lines.append("")

        header = "  " + " ".join(COLUMN_LETTERS)
        lines.append(header)
        for row in range(BOARD_SIZE):
            symbols = " ".join(board.get_cell(row, col).symbol
                               for col in range(BOARD_SIZE))
            lines.append(f"{row} {symbols} {row}")
        lines.append(header)

        if show_info:
            lines.append("")
            lines.append(f"BLACK: {board.disc_count(Cell.BLACK)}  "
                         f"WHITE: {board.disc_count(Cell.WHITE)}  "
                         f"Empty: {board.empty_count()}")
            if board.is_game_over():
                winner = board.winner()
                if winner is None:
                    lines.append("\n*** DRAW ***")
                else:
                    lines.append(f"\n*** {winner} WINS! ***")

        return "\n".join(lines)

    @staticmethod
    def render_compact(board: Board) -> str:
        """Single-line summary for logs."""
        black_moves = board.legal_move_count(Cell.BLACK) or 0
        white_moves = board.legal_move_count(Cell.WHITE) or 0
        return (f"Move {board.move_number} | {board.side_to_move} to move | "
                f"B={board.disc_count(Cell.BLACK)} W={board.disc_count(Cell.WHITE)} | "
                f"moves B:{black_moves} W:{white_moves}")
