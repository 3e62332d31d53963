"""
Strategy Configuration - Tunable parameters for the AI players

Two groups:
- SearchConfig: minimax and alpha-beta (depth, evaluator, root fan-out)
- QLearningConfig: Q-learning training (epochs, rates, exploration, table path)

Both load from OTHELLO_* environment variables and round-trip through JSON.
"""

from dataclasses import dataclass, asdict
from typing import Dict, Any
import os
import json

from othello_ai.heuristics import Heuristic
from othello_ai.matrices import HeuristicMatrix

MIN_DEPTH = 1
MAX_DEPTH = 5

# Q-learning
LEARNING_RATE = 0.8
DISCOUNT_FACTOR = 0.99
INITIAL_EPSILON = 1.0
EPSILON_DECAY = 0.999
WIN_BONUS = 1000

DEFAULT_EPOCHS = 10000
MAX_EPOCHS = 10000
EPOCH_STEP = 500
DEFAULT_MAX_STEP = 64
MIN_MAX_STEP = 1
MAX_MAX_STEP = 64

DEFAULT_Q_TABLE_PATH = "q_table.json"


def _env_bool(name: str, default: bool) -> bool:
    return os.getenv(name, str(default)).lower() in ('1', 'true', 'yes')


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


@dataclass
class SearchConfig:
    """Minimax / alpha-beta settings"""
    depth: int = MAX_DEPTH
    heuristic: Heuristic = Heuristic.GLOBAL
    matrix: HeuristicMatrix = HeuristicMatrix.A
    parallel: bool = False  # Evaluate root candidates concurrently

    def __post_init__(self):
        if not MIN_DEPTH <= self.depth <= MAX_DEPTH:
            raise ValueError(f"depth must be in [{MIN_DEPTH}, {MAX_DEPTH}], got {self.depth}")
        self.heuristic = Heuristic(self.heuristic)
        self.matrix = HeuristicMatrix(self.matrix)

    @classmethod
    def from_env(cls) -> 'SearchConfig':
        """Load from environment variables"""
        return cls(
            depth=int(os.getenv('OTHELLO_DEPTH', MAX_DEPTH)),
            heuristic=Heuristic(os.getenv('OTHELLO_HEURISTIC', Heuristic.GLOBAL.value)),
            matrix=HeuristicMatrix(os.getenv('OTHELLO_MATRIX', HeuristicMatrix.A.value)),
            parallel=_env_bool('OTHELLO_PARALLEL', False),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'depth': self.depth,
            'heuristic': self.heuristic.value,
            'matrix': self.matrix.value,
            'parallel': self.parallel,
        }

    def save(self, filepath: str):
        """Save configuration to file"""
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, filepath: str) -> 'SearchConfig':
        """Load configuration from file"""
        with open(filepath, 'r') as f:
            data = json.load(f)
        return cls(**data)


@dataclass
class QLearningConfig:
    """Q-learning training settings"""
    epochs: int = DEFAULT_EPOCHS
    max_step: int = DEFAULT_MAX_STEP  # Moves per episode
    heuristic: Heuristic = Heuristic.GLOBAL
    matrix: HeuristicMatrix = HeuristicMatrix.A
    learning_rate: float = LEARNING_RATE
    discount: float = DISCOUNT_FACTOR
    epsilon: float = INITIAL_EPSILON
    epsilon_decay: float = EPSILON_DECAY
    q_table_path: str = DEFAULT_Q_TABLE_PATH

    def __post_init__(self):
        if not 1 <= self.epochs <= MAX_EPOCHS:
            raise ValueError(f"epochs must be in [1, {MAX_EPOCHS}], got {self.epochs}")
        if not MIN_MAX_STEP <= self.max_step <= MAX_MAX_STEP:
            raise ValueError(
                f"max_step must be in [{MIN_MAX_STEP}, {MAX_MAX_STEP}], got {self.max_step}")
        self.heuristic = Heuristic(self.heuristic)
        self.matrix = HeuristicMatrix(self.matrix)

    @classmethod
    def from_env(cls) -> 'QLearningConfig':
        """Load from environment variables"""
        return cls(
            epochs=int(os.getenv('OTHELLO_EPOCHS', DEFAULT_EPOCHS)),
            max_step=int(os.getenv('OTHELLO_MAX_STEP', DEFAULT_MAX_STEP)),
            heuristic=Heuristic(os.getenv('OTHELLO_HEURISTIC', Heuristic.GLOBAL.value)),
            matrix=HeuristicMatrix(os.getenv('OTHELLO_MATRIX', HeuristicMatrix.A.value)),
            learning_rate=float(os.getenv('OTHELLO_LEARNING_RATE', LEARNING_RATE)),
            discount=float(os.getenv('OTHELLO_DISCOUNT', DISCOUNT_FACTOR)),
            epsilon=float(os.getenv('OTHELLO_EPSILON', INITIAL_EPSILON)),
            epsilon_decay=float(os.getenv('OTHELLO_EPSILON_DECAY', EPSILON_DECAY)),
            q_table_path=os.getenv('OTHELLO_Q_TABLE', DEFAULT_Q_TABLE_PATH),
        )

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['heuristic'] = self.heuristic.value
        data['matrix'] = self.matrix.value
        return data

    def save(self, filepath: str):
        """Save configuration to file"""
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, filepath: str) -> 'QLearningConfig':
        """Load configuration from file"""
        with open(filepath, 'r') as f:
            data = json.load(f)
        return cls(**data)
