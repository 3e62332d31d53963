"""
Q-Learning - Tabular reinforcement learning player.

Training plays self-play episodes from the start position. Each step picks
an epsilon-greedy move for the side to move, rewards it with the heuristic
score from the mover's point of view (plus a bonus or penalty when the move
ends the game), and updates

    Q[s][a] = (1 - lr) * Q[s][a] + lr * (r + discount * max Q[s'])

truncated toward zero. Live play takes the best stored move among the
current legal moves and falls back to a random legal move.
"""

import logging
import queue
import random
from typing import List, Optional, Tuple

from othello.board import Board
from othello.cell import Cell
from othello.history import HistoryAction
from othello.notation import coordinates_to_notation, notation_to_coordinates
from othello.player import Player
from othello_ai.config import (
    QLearningConfig, WIN_BONUS, MAX_EPOCHS, EPOCH_STEP, MIN_MAX_STEP, MAX_MAX_STEP, clamp,
)
from othello_ai.heuristics import Heuristic, evaluate
from othello_ai.matrices import HeuristicMatrix
from othello_ai.qtable import QTable
from othello_ai.strategy import AIType

logger = logging.getLogger(__name__)


class QLearningStrategy(Player):
    def __init__(self, color: Cell = Cell.BLACK, config: Optional[QLearningConfig] = None,
                 seed: Optional[int] = None):
        super().__init__(color)
        self.config = config or QLearningConfig()
        self.epochs = self.config.epochs
        self.max_step = self.config.max_step
        self.heuristic = self.config.heuristic
        self.matrix = self.config.matrix
        self.epsilon = self.config.epsilon
        self.q_table = QTable()
        self.rng = random.Random(seed)

    def get_ai_type(self) -> AIType:
        return AIType.Q_LEARNING

    def get_heuristic(self) -> Heuristic:
        return self.heuristic

    def set_heuristic(self, heuristic: Heuristic):
        self.heuristic = Heuristic(heuristic)

    def get_matrix(self) -> HeuristicMatrix:
        return self.matrix

    def set_matrix(self, matrix: HeuristicMatrix):
        self.matrix = HeuristicMatrix(matrix)

    def set_epochs(self, epochs: int):
        self.epochs = clamp(epochs, 1, MAX_EPOCHS)

    def increase_epochs(self):
        self.set_epochs(self.epochs + EPOCH_STEP)

    def decrease_epochs(self):
        self.set_epochs(self.epochs - EPOCH_STEP)

    def set_max_step(self, max_step: int):
        self.max_step = clamp(max_step, MIN_MAX_STEP, MAX_MAX_STEP)

    # ── Table ──────────────────────────────────────────────────────────

    def import_q_table(self, path: str):
        self.q_table = QTable.load(path)

    def export_q_table(self, path: Optional[str] = None):
        self.q_table.save(path or self.config.q_table_path)

    def update(self, state: str, notation: str, reward: int, next_state: str) -> int:
        """Apply one Q update for (state, notation) and return the stored value."""
        old = self.q_table.get(state, notation)
        target = reward + self.config.discount * self.q_table.max_value(next_state)
        value = int((1 - self.config.learning_rate) * old
                    + self.config.learning_rate * target)
        self.q_table.set(state, notation, value)
        return value

    # ── Move choice ────────────────────────────────────────────────────

    def _greedy(self, state: str, moves: List[Tuple[int, int]]) -> Optional[Tuple[int, int]]:
        legal = [coordinates_to_notation(row, col) for row, col in moves]
        best = self.q_table.best_action(state, legal)
        if best is None:
            return None
        return notation_to_coordinates(best)

    def choose_move(self, board: Board, moves: List[Tuple[int, int]],
                    explore: bool = True) -> Tuple[int, int]:
        """Epsilon-greedy pick among ``moves``; random when the state is unknown."""
        state = board.state_key()
        if explore and (self.rng.random() < self.epsilon or state not in self.q_table):
            return self.rng.choice(moves)
        return self._greedy(state, moves) or self.rng.choice(moves)

    # ── Training ───────────────────────────────────────────────────────

    def run_episode(self) -> Tuple[int, bool]:
        """Play one self-play episode. Returns (total reward, reached game over)."""
        board = Board()
        state = board.state_key()
        total_reward = 0
        step = 0

        while step < self.max_step and not board.is_game_over():
            step += 1
            mover = board.side_to_move
            moves = board.legal_moves(mover)
            if moves is None:
                board.pass_turn()
                continue

            row, col = self.choose_move(board, moves)
            board.apply(row, col, mover)

            reward = evaluate(board, mover, self.heuristic, self.matrix)
            if board.is_game_over():
                winner = board.winner()
                if winner == mover:
                    reward += WIN_BONUS
                elif winner == mover.opponent():
                    reward -= WIN_BONUS

            next_state = board.state_key()
            self.update(state, coordinates_to_notation(row, col), reward, next_state)
            state = next_state
            total_reward += reward
            board.next_turn()

        return total_reward, board.is_game_over()

    def train(self, progress: Optional[queue.Queue] = None):
        """Run all epochs, publishing progress fractions, then save the table."""
        logger.info(f"Training Q-learning for {self.epochs} epochs "
                    f"(max_step={self.max_step}, {self.heuristic.name}/{self.matrix.name})")
        for i in range(self.epochs):
            total_reward, finished = self.run_episode()
            self.epsilon *= self.config.epsilon_decay

            if progress is not None:
                progress.put((i + 1) / self.epochs)
            if (i + 1) % EPOCH_STEP == 0:
                logger.info(f"Epoch {i + 1}/{self.epochs}: reward={total_reward} "
                            f"finished={finished} epsilon={self.epsilon:.4f} "
                            f"states={len(self.q_table)}")

        self.export_q_table()

    # ── Live play ──────────────────────────────────────────────────────

    def play_turn(self, board: Board,
                  cell: Optional[Tuple[int, int]] = None) -> HistoryAction:
        self.check_turn(board)
        moves = board.legal_moves(self.color)
        if moves is None:
            return self._pass(board)
        row, col = self.choose_move(board, moves, explore=False)
        return self._apply_and_record(board, row, col)
