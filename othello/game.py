"""
Game - Match driver that alternates two players over one board.

Owns the move history. Each ``step`` asks the side to move for one turn and
records the result, adding a pass record when the opponent was left without
a legal move.
"""

import logging
from typing import Dict, List, Optional, Tuple

from othello.board import Board
from othello.cell import Cell
from othello.errors import InvalidMove
from othello.history import HistoryAction
from othello.player import Player

logger = logging.getLogger(__name__)


class Game:
    """A single match between a BLACK and a WHITE player."""

    def __init__(self, black: Player, white: Player, board: Optional[Board] = None):
        if black.color != Cell.BLACK or white.color != Cell.WHITE:
            raise ValueError("Players must be assigned BLACK and WHITE respectively")
        self.board = board if board is not None else Board()
        self.players: Dict[Cell, Player] = {Cell.BLACK: black, Cell.WHITE: white}
        self.history: List[HistoryAction] = []

    @property
    def current_player(self) -> Player:
        return self.players[self.board.side_to_move]

    def step(self, cell: Optional[Tuple[int, int]] = None) -> HistoryAction:
        """Play one turn for the side to move. ``cell`` is used by human players."""
        if self.is_over():
            raise InvalidMove("The game is already over")

        action = self.current_player.play_turn(self.board, cell)
        self.history.append(action)

        if (not action.is_pass and action.next_color == action.color
                and not self.board.is_game_over()):
            self.history.append(
                HistoryAction.forced_pass(action.color.opponent(), action.move_number + 1))
        return action

    def play(self, max_turns: Optional[int] = None) -> Optional[Cell]:
        """Run turns until the game ends (or ``max_turns`` steps) and return the winner."""
        turns = 0
        while not self.is_over():
            if max_turns is not None and turns >= max_turns:
                break
            self.step()
            turns += 1

        if self.is_over():
            black, white = self.score()
            logger.info(f"Game over after {turns} turns: BLACK {black} - WHITE {white}")
        return self.winner()

    def is_over(self) -> bool:
        return self.board.is_game_over()

    def winner(self) -> Optional[Cell]:
        return self.board.winner()

    def score(self) -> Tuple[int, int]:
        """(black discs, white discs)."""
        return self.board.disc_count(Cell.BLACK), self.board.disc_count(Cell.WHITE)

    @property
    def moves_played(self) -> int:
        return sum(1 for action in self.history if not action.is_pass)
