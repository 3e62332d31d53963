"""
Othello - Board rules, turn order and match driving.

Components:
- Cell: tri-state square occupant
- Board: 8x8 rule engine (legal moves, captures, passes, state keys)
- HistoryAction: immutable record of one turn
- Player / HumanPlayer: the turn-taking capability
- Game: alternates two players and keeps the history
- BoardRenderer: ASCII output
"""

from othello.cell import Cell, PLAYABLE_COLORS
from othello.errors import (
    OthelloError, OutOfBounds, InvalidMove, OccupiedCell, InvalidColor,
    NoCapturingLine, TableImportError, ConcurrencyFailure,
)
from othello.notation import notation_to_coordinates, coordinates_to_notation, BOARD_SIZE
from othello.board import Board
from othello.history import HistoryAction
from othello.player import Player, HumanPlayer
from othello.game import Game
from othello.renderer import BoardRenderer

__all__ = [
    'Cell', 'PLAYABLE_COLORS',
    'OthelloError', 'OutOfBounds', 'InvalidMove', 'OccupiedCell', 'InvalidColor',
    'NoCapturingLine', 'TableImportError', 'ConcurrencyFailure',
    'notation_to_coordinates', 'coordinates_to_notation', 'BOARD_SIZE',
    'Board', 'HistoryAction', 'Player', 'HumanPlayer', 'Game', 'BoardRenderer',
]
