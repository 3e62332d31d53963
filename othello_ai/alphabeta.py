"""
Alpha-Beta - Minimax with alpha-beta pruning.

Same tree and leaf scores as minimax, but a node stops expanding children as
soon as its (alpha, beta) window closes. Given the same depth and heuristic
the chosen root score equals the minimax one.
"""

import logging

from othello.board import Board
from othello.errors import InvalidMove
from othello_ai.strategy import AIType, SearchStrategy

logger = logging.getLogger(__name__)


class AlphaBetaStrategy(SearchStrategy):
    ai_type = AIType.ALPHA_BETA

    def search(self, board: Board, depth: int,
               alpha: float = float('-inf'), beta: float = float('inf')) -> float:
        mover = board.side_to_move
        moves = board.legal_moves(mover)
        if depth <= 1 or moves is None:
            return self.score(board)

        minimizing = depth % 2 == 1
        for row, col in moves:
            child = board.copy()
            try:
                child.apply(row, col, mover)
            except InvalidMove as e:
                logger.warning(f"Skipping branch ({row}, {col}): {e}")
                continue
            child.next_turn()

            value = self.search(child, depth - 1, alpha, beta)
            if minimizing:
                beta = min(beta, value)
                if alpha >= beta:
                    return beta
            else:
                alpha = max(alpha, value)
                if alpha >= beta:
                    return alpha
        return beta if minimizing else alpha
