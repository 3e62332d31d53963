"""
Othello AI - Move selection strategies for the Othello engine.

- Heuristics: ABSOLUTE, MATRIX, MOBILITY, MIXED, GLOBAL evaluators
- MinimaxStrategy / AlphaBetaStrategy: depth-limited search with optional
  concurrent root evaluation
- QLearningStrategy: tabular self-play learning with JSON persistence
- TrainingJob: background training with a progress channel
"""

from othello_ai.matrices import HeuristicMatrix
from othello_ai.heuristics import Heuristic, evaluate
from othello_ai.action import Action
from othello_ai.config import SearchConfig, QLearningConfig, MAX_DEPTH
from othello_ai.strategy import AIType, SearchStrategy, create_strategy
from othello_ai.minimax import MinimaxStrategy
from othello_ai.alphabeta import AlphaBetaStrategy
from othello_ai.qtable import QTable
from othello_ai.qlearning import QLearningStrategy
from othello_ai.trainer import TrainingJob

__all__ = [
    "HeuristicMatrix", "Heuristic", "evaluate", "Action",
    "SearchConfig", "QLearningConfig", "MAX_DEPTH",
    "AIType", "SearchStrategy", "create_strategy",
    "MinimaxStrategy", "AlphaBetaStrategy",
    "QTable", "QLearningStrategy", "TrainingJob",
]
