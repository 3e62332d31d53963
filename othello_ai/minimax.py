"""
Minimax - Exhaustive depth-limited search.

Every legal move of the side to move is expanded on a board copy, down to
the configured depth. Leaves are scored by the heuristic from the
strategy's own color.
"""

import logging

from othello.board import Board
from othello.errors import InvalidMove
from othello_ai.strategy import AIType, SearchStrategy

logger = logging.getLogger(__name__)


class MinimaxStrategy(SearchStrategy):
    ai_type = AIType.MINIMAX

    def search(self, board: Board, depth: int) -> float:
        mover = board.side_to_move
        moves = board.legal_moves(mover)
        if depth <= 1 or moves is None:
            return self.score(board)

        maximizing = depth % 2 == 0
        best = float('-inf') if maximizing else float('inf')
        for row, col in moves:
            child = board.copy()
            try:
                child.apply(row, col, mover)
            except InvalidMove as e:
                logger.warning(f"Skipping branch ({row}, {col}): {e}")
                continue
            child.next_turn()

            value = self.search(child, depth - 1)
            best = max(best, value) if maximizing else min(best, value)
        return best
