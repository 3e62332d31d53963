"""
Tests for the match driver.

Tests cover:
- Human turns and move records
- Synthesized pass records
- Search config persistence
- AI-vs-AI matches
"""

import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from othello.board import Board
from othello.cell import Cell
from othello.errors import InvalidMove, NoCapturingLine
from othello.game import Game
from othello.history import HistoryAction
from othello.player import HumanPlayer
from othello_ai.alphabeta import AlphaBetaStrategy
from othello_ai.config import SearchConfig
from othello_ai.heuristics import Heuristic
from othello_ai.matrices import HeuristicMatrix
from othello_ai.minimax import MinimaxStrategy


EMPTY_ROW = "........"


def human_game(board=None) -> Game:
    return Game(HumanPlayer(Cell.BLACK), HumanPlayer(Cell.WHITE), board)


def pass_board() -> Board:
    # WHITE can never flank anything; BLACK has one move on each edge row
    return Board.from_rows([
        "BW......",
        EMPTY_ROW, EMPTY_ROW, EMPTY_ROW, EMPTY_ROW, EMPTY_ROW, EMPTY_ROW,
        "BW......",
    ])


class TestHistoryAction:
    def test_immutable(self):
        record = HistoryAction("2D", 2, Cell.BLACK, Cell.WHITE, 1)
        with pytest.raises(AttributeError):
            record.notation = "3C"

    def test_forced_pass(self):
        record = HistoryAction.forced_pass(Cell.WHITE, 4)
        assert record.is_pass
        assert record.next_color == Cell.BLACK
        assert str(record) == "4. WHITE passes"

    def test_str(self):
        assert str(HistoryAction("2D", 2, Cell.BLACK, Cell.WHITE, 1)) == "1. BLACK 2D (+2)"


class TestHumanTurns:
    def test_step_records_move(self):
        game = human_game()
        record = game.step((2, 3))
        assert record == HistoryAction("2D", 2, Cell.BLACK, Cell.WHITE, 1)
        assert game.history == [record]
        assert game.current_player.color == Cell.WHITE

    def test_human_needs_a_cell(self):
        game = human_game()
        with pytest.raises(InvalidMove):
            game.step()
        assert game.history == []

    def test_illegal_cell_leaves_state(self):
        game = human_game()
        with pytest.raises(NoCapturingLine):
            game.step((0, 0))
        assert game.board.move_number == 1
        assert game.history == []

    def test_out_of_turn_move_rejected(self):
        board = Board()
        key = board.state_key()
        with pytest.raises(InvalidMove):
            HumanPlayer(Cell.WHITE).play_turn(board, (2, 4))
        assert board.state_key() == key
        assert board.side_to_move == Cell.BLACK
        assert board.move_number == 1

    def test_players_must_match_colors(self):
        with pytest.raises(ValueError):
            Game(HumanPlayer(Cell.WHITE), HumanPlayer(Cell.BLACK))


class TestPasses:
    def test_forced_pass_is_recorded(self):
        game = human_game(pass_board())
        record = game.step((0, 2))
        assert record.next_color == Cell.BLACK
        assert len(game.history) == 2
        assert game.history[1] == HistoryAction.forced_pass(Cell.WHITE, 2)
        assert game.board.move_number == 3
        assert game.current_player.color == Cell.BLACK

    def test_last_move_ends_game(self):
        game = human_game(pass_board())
        game.step((0, 2))
        game.step((7, 2))
        assert game.is_over()
        assert game.winner() == Cell.BLACK
        assert game.score() == (6, 0)
        assert game.moves_played == 2
        with pytest.raises(InvalidMove):
            game.step((1, 0))

    def test_human_with_no_moves_passes(self):
        board = pass_board()
        board.side_to_move = Cell.WHITE
        game = human_game(board)
        record = game.step()
        assert record.is_pass
        assert game.current_player.color == Cell.BLACK


class TestSearchConfig:
    def test_save_load(self, tmp_path):
        path = str(tmp_path / "search.json")
        config = SearchConfig(depth=3, heuristic=Heuristic.MIXED, matrix=HeuristicMatrix.B,
                              parallel=True)
        config.save(path)
        assert SearchConfig.load(path) == config

    def test_to_dict(self):
        assert SearchConfig(depth=2).to_dict() == {
            'depth': 2, 'heuristic': 'global', 'matrix': 'A', 'parallel': False,
        }

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv('OTHELLO_DEPTH', '2')
        monkeypatch.setenv('OTHELLO_PARALLEL', 'true')
        monkeypatch.setenv('OTHELLO_HEURISTIC', 'absolute')
        config = SearchConfig.from_env()
        assert config.depth == 2
        assert config.parallel
        assert config.heuristic == Heuristic.ABSOLUTE


class TestMatches:
    def test_ai_match_history(self):
        game = Game(MinimaxStrategy(Cell.BLACK, SearchConfig(depth=1)),
                    AlphaBetaStrategy(Cell.WHITE, SearchConfig(depth=2)))
        winner = game.play()
        assert game.is_over()
        assert winner == game.winner()

        numbers = [record.move_number for record in game.history]
        assert numbers == list(range(1, len(numbers) + 1))
        gained = sum(r.gained_discs for r in game.history if not r.is_pass)
        black, white = game.score()
        # Each move adds exactly one disc to the board
        assert black + white == 4 + game.moves_played
        assert gained >= 2 * game.moves_played

    def test_max_turns(self):
        game = Game(AlphaBetaStrategy(Cell.BLACK, SearchConfig(depth=1)),
                    AlphaBetaStrategy(Cell.WHITE, SearchConfig(depth=1)))
        game.play(max_turns=4)
        assert len([r for r in game.history if not r.is_pass]) == 4
        assert not game.is_over()
