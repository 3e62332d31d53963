"""
Strategy - Shared machinery for the AI players.

- AIType: which algorithm a player runs, cyclable for menus
- SearchStrategy: root move selection shared by minimax and alpha-beta
- create_strategy: build a player from a config
"""

import logging
from enum import Enum
from typing import Optional, Tuple, Union

from othello.board import Board
from othello.cell import Cell
from othello.history import HistoryAction
from othello.player import Player
from othello_ai.action import Action
from othello_ai.config import MIN_DEPTH, MAX_DEPTH, SearchConfig, QLearningConfig, clamp
from othello_ai.fanout import fan_out
from othello_ai.heuristics import Heuristic, evaluate
from othello_ai.matrices import HeuristicMatrix

logger = logging.getLogger(__name__)


class AIType(Enum):
    ALPHA_BETA = "alphabeta"
    MINIMAX = "minimax"
    Q_LEARNING = "qlearning"

    def next(self) -> 'AIType':
        members = list(AIType)
        return members[(members.index(self) + 1) % len(members)]

    def previous(self) -> 'AIType':
        members = list(AIType)
        return members[(members.index(self) - 1) % len(members)]

    def __str__(self) -> str:
        return self.name.replace('_', '-').title()


class SearchStrategy(Player):
    """
    Depth-limited tree search player.

    Subclasses implement ``search(board, depth)``, the value of a position
    with ``depth`` plies remaining, scored for ``self.color``. Nodes with an
    even remaining depth maximize and odd ones minimize.
    """

    ai_type: AIType = None

    def __init__(self, color: Cell, config: Optional[SearchConfig] = None):
        super().__init__(color)
        config = config or SearchConfig()
        self.depth = config.depth
        self.heuristic = config.heuristic
        self.matrix = config.matrix
        self.parallel = config.parallel

    def get_ai_type(self) -> AIType:
        return self.ai_type

    def get_depth(self) -> int:
        return self.depth

    def set_depth(self, depth: int):
        self.depth = clamp(depth, MIN_DEPTH, MAX_DEPTH)

    def increase_depth(self):
        self.set_depth(self.depth + 1)

    def decrease_depth(self):
        self.set_depth(self.depth - 1)

    def get_heuristic(self) -> Heuristic:
        return self.heuristic

    def set_heuristic(self, heuristic: Heuristic):
        self.heuristic = Heuristic(heuristic)

    def get_matrix(self) -> HeuristicMatrix:
        return self.matrix

    def set_matrix(self, matrix: HeuristicMatrix):
        self.matrix = HeuristicMatrix(matrix)

    def is_parallel(self) -> bool:
        return self.parallel

    def set_parallel(self, parallel: bool):
        self.parallel = bool(parallel)

    def score(self, board: Board) -> int:
        return evaluate(board, self.color, self.heuristic, self.matrix)

    def search(self, board: Board, depth: int) -> float:
        raise NotImplementedError

    # ── Root selection ─────────────────────────────────────────────────

    def evaluate_candidate(self, board: Board, position: Tuple[int, int]) -> float:
        """Score of playing ``position`` now, searched to the configured depth."""
        child = board.copy()
        child.apply(position[0], position[1], self.color)
        child.next_turn()
        return self.search(child, self.depth)

    def best_action(self, board: Board) -> Optional[Action]:
        """
        Highest scoring legal move for ``self.color``, or None if there is none.

        Sequential evaluation keeps the first of equally scored moves in
        row-major order. With ``parallel`` set, candidates are evaluated
        concurrently and ties go to whichever finished first.
        """
        candidates = board.legal_moves(self.color)
        if candidates is None:
            return None

        if self.parallel:
            scored = fan_out(candidates, lambda pos: self.evaluate_candidate(board, pos))
        else:
            scored = [(pos, self.evaluate_candidate(board, pos)) for pos in candidates]

        best = Action(position=candidates[0])
        for position, value in scored:
            logger.debug(f"{self.color} candidate {Action(position).notation}: {value}")
            if value > best.score:
                best = Action(position=position, score=value)
        return best

    def play_turn(self, board: Board,
                  cell: Optional[Tuple[int, int]] = None) -> HistoryAction:
        self.check_turn(board)
        action = self.best_action(board)
        if action is None:
            return self._pass(board)
        logger.debug(f"{self} chose {action.notation} (score {action.score})")
        return self._apply_and_record(board, *action.position)

    def __str__(self) -> str:
        return (f"{self.ai_type}({self.color}, depth={self.depth}, "
                f"{self.heuristic.name}/{self.matrix.name})")


def create_strategy(ai_type: Union[AIType, str], color: Cell,
                    config: Union[SearchConfig, QLearningConfig, None] = None) -> Player:
    """Build an AI player of ``ai_type`` for ``color``."""
    ai_type = AIType(ai_type)

    if ai_type == AIType.Q_LEARNING:
        from othello_ai.qlearning import QLearningStrategy
        if config is not None and not isinstance(config, QLearningConfig):
            config = QLearningConfig(heuristic=config.heuristic, matrix=config.matrix)
        return QLearningStrategy(color, config)

    if config is not None and not isinstance(config, SearchConfig):
        config = SearchConfig(heuristic=config.heuristic, matrix=config.matrix)
    if ai_type == AIType.MINIMAX:
        from othello_ai.minimax import MinimaxStrategy
        return MinimaxStrategy(color, config)
    from othello_ai.alphabeta import AlphaBetaStrategy
    return AlphaBetaStrategy(color, config)
