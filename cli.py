#!/usr/bin/env python3
"""
Othello AI - Command Line Interface

Play matches between strategies, train the Q-learning player and compare
search timings.

Usage:
    python cli.py play --black alphabeta --white minimax --depth 3
    python cli.py play --black human --white qlearning --white-table q_table.json
    python cli.py train --epochs 2000 --output q_table.json
    python cli.py benchmark --depth 4
"""

import argparse
import logging
import sys
import time

from othello.board import Board
from othello.cell import Cell
from othello.errors import InvalidMove, OutOfBounds, TableImportError, ConcurrencyFailure
from othello.game import Game
from othello.notation import notation_to_coordinates
from othello.player import HumanPlayer
from othello.renderer import BoardRenderer
from othello_ai.alphabeta import AlphaBetaStrategy
from othello_ai.config import (
    SearchConfig, QLearningConfig, MAX_DEPTH, DEFAULT_EPOCHS, DEFAULT_MAX_STEP,
    DEFAULT_Q_TABLE_PATH,
)
from othello_ai.heuristics import Heuristic
from othello_ai.matrices import HeuristicMatrix
from othello_ai.minimax import MinimaxStrategy
from othello_ai.qlearning import QLearningStrategy
from othello_ai.strategy import AIType, create_strategy
from othello_ai.trainer import TrainingJob

PLAYER_TYPES = ['human'] + [t.value for t in AIType]
HEURISTICS = [h.value for h in Heuristic]
MATRICES = [m.value for m in HeuristicMatrix]


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='othello-ai',
        description='Othello with minimax, alpha-beta and Q-learning players'
    )
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Verbose output')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # Play command
    play_parser = subparsers.add_parser('play', help='Play a match')
    play_parser.add_argument('--black', '-b', choices=PLAYER_TYPES, default='alphabeta',
                             help='BLACK player type')
    play_parser.add_argument('--white', '-w', choices=PLAYER_TYPES, default='minimax',
                             help='WHITE player type')
    play_parser.add_argument('--depth', '-d', type=int, default=3,
                             help=f'Search depth (1-{MAX_DEPTH})')
    play_parser.add_argument('--heuristic', choices=HEURISTICS, default=Heuristic.GLOBAL.value,
                             help='Evaluation heuristic')
    play_parser.add_argument('--matrix', choices=MATRICES, default=HeuristicMatrix.A.value,
                             help='Weight table for matrix-based heuristics')
    play_parser.add_argument('--parallel', action='store_true',
                             help='Evaluate root moves concurrently')
    play_parser.add_argument('--black-table', type=str, default=None,
                             help='Q-table to load for a Q-learning BLACK player')
    play_parser.add_argument('--white-table', type=str, default=None,
                             help='Q-table to load for a Q-learning WHITE player')
    play_parser.add_argument('--quiet', '-q', action='store_true',
                             help='Only print the final result')

    # Train command
    train_parser = subparsers.add_parser('train', help='Train the Q-learning player')
    train_parser.add_argument('--epochs', '-e', type=int, default=DEFAULT_EPOCHS,
                              help='Training episodes')
    train_parser.add_argument('--max-step', type=int, default=DEFAULT_MAX_STEP,
                              help='Moves per episode')
    train_parser.add_argument('--heuristic', choices=HEURISTICS, default=Heuristic.GLOBAL.value,
                              help='Reward heuristic')
    train_parser.add_argument('--matrix', choices=MATRICES, default=HeuristicMatrix.A.value,
                              help='Weight table for matrix-based heuristics')
    train_parser.add_argument('--output', '-o', type=str, default=DEFAULT_Q_TABLE_PATH,
                              help='Where to save the Q-table')

    # Benchmark command
    bench_parser = subparsers.add_parser('benchmark', help='Time the search strategies')
    bench_parser.add_argument('--depth', '-d', type=int, default=4,
                              help=f'Search depth (1-{MAX_DEPTH})')
    bench_parser.add_argument('--heuristic', choices=HEURISTICS, default=Heuristic.GLOBAL.value,
                              help='Evaluation heuristic')

    return parser


def build_player(kind: str, color: Cell, config: SearchConfig, table: str = None):
    if kind == 'human':
        return HumanPlayer(color)
    if kind == AIType.Q_LEARNING.value:
        player = create_strategy(kind, color,
                                 QLearningConfig(heuristic=config.heuristic, matrix=config.matrix))
        if table:
            player.import_q_table(table)
        return player
    return create_strategy(kind, color, config)


def read_human_move(game: Game):
    """Prompt until the human enters a legal move."""
    color = game.board.side_to_move
    while True:
        text = input(f"{color} move (e.g. 2D): ").strip()
        cell = notation_to_coordinates(text)
        if cell is None:
            print(f"  Could not read {text!r}; use a row digit then a column letter")
            continue
        if not game.board.is_legal(cell[0], cell[1], color):
            print(f"  {text.upper()} is not a legal move")
            continue
        return cell


def cmd_play(args):
    """Play a match and print the result"""
    try:
        config = SearchConfig(depth=args.depth, heuristic=args.heuristic,
                              matrix=args.matrix, parallel=args.parallel)
        black = build_player(args.black, Cell.BLACK, config, args.black_table)
        white = build_player(args.white, Cell.WHITE, config, args.white_table)
    except (ValueError, TableImportError) as e:
        print(f"Error: {e}")
        return 1

    game = Game(black, white)
    print(f"BLACK: {args.black}  WHITE: {args.white}  "
          f"depth={args.depth} heuristic={args.heuristic} matrix={args.matrix}")

    while not game.is_over():
        if not args.quiet:
            print()
            print(BoardRenderer.render(game.board))
        cell = None
        player = game.current_player
        if player.is_human() and game.board.legal_move_count(player.color) is not None:
            cell = read_human_move(game)
        try:
            action = game.step(cell)
        except (InvalidMove, OutOfBounds, ConcurrencyFailure) as e:
            print(f"Error: {e}")
            return 1
        if not args.quiet:
            print(f"  {action}")

    print()
    print(BoardRenderer.render(game.board))
    black_discs, white_discs = game.score()
    print(f"\nFinal score: BLACK {black_discs} - WHITE {white_discs} "
          f"({game.moves_played} moves)")
    return 0


def cmd_train(args):
    """Train the Q-learning player in the background"""
    try:
        config = QLearningConfig(epochs=args.epochs, max_step=args.max_step,
                                 heuristic=args.heuristic, matrix=args.matrix,
                                 q_table_path=args.output)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    print("=" * 60)
    print("OTHELLO AI - Q-Learning Training")
    print("=" * 60)
    print(f"Epochs: {config.epochs}  Max steps: {config.max_step}  "
          f"Heuristic: {config.heuristic.value}  Matrix: {config.matrix.value}")

    strategy = QLearningStrategy(Cell.BLACK, config)
    job = TrainingJob(strategy)
    start = time.time()
    last_shown = -1
    while not job.join(timeout=0.5):
        percent = int(job.poll() * 100)
        if percent != last_shown:
            print(f"  Progress: {percent:3d}%  ({time.time() - start:.1f}s)")
            last_shown = percent
    job.poll()

    if job.error is not None:
        print(f"Training failed: {job.error}")
        return 1

    print("-" * 60)
    print(f"Done in {time.time() - start:.1f}s")
    print(f"States learned: {len(strategy.q_table)}  "
          f"Entries: {strategy.q_table.total_entries()}")
    print(f"Q-table saved to {config.q_table_path}")
    return 0


def cmd_benchmark(args):
    """Time minimax vs alpha-beta, sequential vs parallel, on the start position"""
    try:
        base = SearchConfig(depth=args.depth, heuristic=args.heuristic)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    print("=" * 60)
    print("OTHELLO AI - Search Benchmark")
    print("=" * 60)
    print(f"Depth: {base.depth}  Heuristic: {base.heuristic.value}")
    print("-" * 60)

    results = {}
    for strategy_cls in (MinimaxStrategy, AlphaBetaStrategy):
        for parallel in (False, True):
            config = SearchConfig(depth=base.depth, heuristic=base.heuristic,
                                  matrix=base.matrix, parallel=parallel)
            strategy = strategy_cls(Cell.BLACK, config)
            start = time.time()
            action = strategy.best_action(Board())
            elapsed = time.time() - start
            label = f"{strategy.ai_type} ({'parallel' if parallel else 'sequential'})"
            results[label] = elapsed
            print(f"{label:32s} {elapsed:8.3f}s  best={action.notation} score={action.score}")

    print("-" * 60)
    fastest = min(results, key=results.get)
    print(f"Fastest: {fastest}")
    return 0


def main():
    parser = create_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(name)s %(levelname)s %(message)s'
    )

    if not args.command:
        parser.print_help()
        return 0

    # Map commands to functions
    commands = {
        'play': cmd_play,
        'train': cmd_train,
        'benchmark': cmd_benchmark,
    }

    if args.command in commands:
        return commands[args.command](args)
    else:
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main() or 0)
