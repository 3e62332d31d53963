"""
Tests for the static evaluators and weight tables.
"""

import sys
import os
import numpy as np

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from othello.board import Board
from othello.cell import Cell
from othello_ai.heuristics import Heuristic, evaluate, OPENING_END, MIDGAME_END
from othello_ai.matrices import HeuristicMatrix, MATRIX_A, MATRIX_B


EMPTY_ROW = "........"


def corner_board(move_number: int) -> Board:
    # BLACK holds a corner and two edge squares, WHITE one X-square
    return Board.from_rows([
        "BB......",
        "BW......",
        EMPTY_ROW, EMPTY_ROW, EMPTY_ROW, EMPTY_ROW, EMPTY_ROW, EMPTY_ROW,
    ], move_number=move_number)


class TestMatrices:
    def test_shape_and_symmetry(self):
        for table in (MATRIX_A, MATRIX_B):
            assert table.shape == (8, 8)
            assert np.array_equal(table, table[::-1, :])
            assert np.array_equal(table, table[:, ::-1])

    def test_corners_and_x_squares(self):
        assert MATRIX_A[0, 0] == 100
        assert MATRIX_A[1, 1] == -50
        assert MATRIX_B[7, 7] == 500
        assert MATRIX_B[6, 6] == -250

    def test_read_only(self):
        with pytest.raises(ValueError):
            MATRIX_A[0, 0] = 0
        assert HeuristicMatrix.A.weights is MATRIX_A

    def test_cycle(self):
        assert HeuristicMatrix.A.next() == HeuristicMatrix.B
        assert HeuristicMatrix.B.next() == HeuristicMatrix.A
        assert HeuristicMatrix.A.previous() == HeuristicMatrix.B


class TestHeuristicEnum:
    def test_cycle_forward(self):
        order = [Heuristic.ABSOLUTE, Heuristic.MATRIX, Heuristic.MOBILITY,
                 Heuristic.MIXED, Heuristic.GLOBAL]
        for current, following in zip(order, order[1:] + order[:1]):
            assert current.next() == following
            assert following.previous() == current

    def test_uses_matrix(self):
        assert not Heuristic.ABSOLUTE.uses_matrix
        assert not Heuristic.MOBILITY.uses_matrix
        assert Heuristic.MATRIX.uses_matrix
        assert Heuristic.MIXED.uses_matrix
        assert Heuristic.GLOBAL.uses_matrix


class TestEvaluate:
    def test_start_position(self):
        board = Board()
        assert evaluate(board, Cell.BLACK, Heuristic.ABSOLUTE) == 0
        assert evaluate(board, Cell.BLACK, Heuristic.MOBILITY) == 0
        assert evaluate(board, Cell.BLACK, Heuristic.MATRIX, HeuristicMatrix.A) == -2
        assert evaluate(board, Cell.BLACK, Heuristic.MATRIX, HeuristicMatrix.B) == 32
        assert evaluate(board, Cell.BLACK, Heuristic.GLOBAL, HeuristicMatrix.A) == -2

    def test_absolute_after_move(self):
        board = Board()
        board.apply(2, 3, Cell.BLACK)
        assert evaluate(board, Cell.BLACK, Heuristic.ABSOLUTE) == 3
        assert evaluate(board, Cell.WHITE, Heuristic.ABSOLUTE) == -3
        assert evaluate(board, Cell.BLACK, Heuristic.MATRIX) == -4

    def test_matrix_corner(self):
        board = corner_board(1)
        assert evaluate(board, Cell.BLACK, Heuristic.MATRIX) == 100 - 20 - 20
        assert evaluate(board, Cell.WHITE, Heuristic.MATRIX) == -50

    def test_mobility_treats_no_moves_as_zero(self):
        board = corner_board(1)
        assert board.legal_move_count(Cell.WHITE) is None
        black_moves = board.legal_move_count(Cell.BLACK)
        assert evaluate(board, Cell.BLACK, Heuristic.MOBILITY) == black_moves
        assert evaluate(board, Cell.WHITE, Heuristic.MOBILITY) == -black_moves

    def test_mixed_phases(self):
        opening = corner_board(OPENING_END - 1)
        midgame = corner_board(OPENING_END)
        endgame = corner_board(MIDGAME_END)
        assert evaluate(opening, Cell.BLACK, Heuristic.MIXED) == \
            evaluate(opening, Cell.BLACK, Heuristic.MATRIX)
        assert evaluate(midgame, Cell.BLACK, Heuristic.MIXED) == \
            evaluate(midgame, Cell.BLACK, Heuristic.MOBILITY)
        assert evaluate(endgame, Cell.BLACK, Heuristic.MIXED) == \
            evaluate(endgame, Cell.BLACK, Heuristic.ABSOLUTE)

    def test_global_is_sum(self):
        board = corner_board(1)
        expected = sum(evaluate(board, Cell.BLACK, h, HeuristicMatrix.B)
                       for h in (Heuristic.ABSOLUTE, Heuristic.MATRIX, Heuristic.MOBILITY))
        assert evaluate(board, Cell.BLACK, Heuristic.GLOBAL, HeuristicMatrix.B) == expected

    def test_method_form(self):
        board = corner_board(1)
        assert Heuristic.MATRIX.evaluate(board, Cell.BLACK, HeuristicMatrix.B) == \
            evaluate(board, Cell.BLACK, Heuristic.MATRIX, HeuristicMatrix.B)

    def test_returns_plain_int_and_does_not_mutate(self):
        board = Board()
        key = board.state_key()
        for heuristic in Heuristic:
            value = evaluate(board, Cell.WHITE, heuristic, HeuristicMatrix.B)
            assert type(value) is int
        assert board.state_key() == key
        assert board.move_number == 1
