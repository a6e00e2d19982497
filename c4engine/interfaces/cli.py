"""
cli.py - Command-line interface for the Connect Four engine

This module provides a hot-seat console game for two people, a command that
replays a list of moves and prints the outcome, and a small benchmark of the
engine. It only talks to the engine through the public game API.
"""

import argparse
import random
import sys
from typing import Dict, List, Optional, Union

from c4engine.debug import debug, DebugLevel
from c4engine.game.errors import ColumnFullError, GameOverError, InvalidColumnError, MoveError
from c4engine.game.rules import GameState, new_game
from c4engine.utils import Player, GameStatus

DEFAULT_NAMES = {Player.ONE: "Player 1", Player.TWO: "Player 2"}

QUIT = 'q'
RESET = 'r'


def player_names(player1: Optional[str], player2: Optional[str]) -> Dict[Player, str]:
    """Map players to display names, falling back to the defaults for blank names."""
    names = dict(DEFAULT_NAMES)
    if player1 and player1.strip():
        names[Player.ONE] = player1.strip()
    if player2 and player2.strip():
        names[Player.TWO] = player2.strip()
    return names


def describe_status(state: GameState, names: Dict[Player, str]) -> str:
    """One-line summary of a game for display."""
    if state.winner is not None:
        return f"{names[state.winner]} won!"
    if state.status == GameStatus.TIED:
        return "It's a tie!"
    return f"{names[state.current_player]} ({state.current_player}) to move."


def parse_moves(moves_str: str) -> List[int]:
    """Parse a comma-separated list of column numbers."""
    return [int(part) for part in moves_str.split(',') if part.strip()]


class SimpleCLI:
    """Console front end for Connect Four."""

    def __init__(self):
        self.args = None

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments and configure logging."""
        parser = argparse.ArgumentParser(prog='c4engine', description='Connect Four')
        parser.add_argument('--debug', action='store_true', help='Enable debug logging')
        parser.add_argument('--debug-level', default='warning',
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Logging level (ignored with --debug)')
        parser.add_argument('--log-file', default=None, help='Also write log messages to this file')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        play_parser = subparsers.add_parser('play', help='Play a two-player game in the terminal')
        play_parser.add_argument('--player1', default='', help='Name of the first player')
        play_parser.add_argument('--player2', default='', help='Name of the second player')

        show_parser = subparsers.add_parser('show', help='Replay moves and show the result')
        show_parser.add_argument('--moves', required=True,
                                 help='Comma-separated column numbers, e.g. 3,3,4')

        benchmark_parser = subparsers.add_parser('benchmark', help='Benchmark the engine')
        benchmark_parser.add_argument('--iterations', type=int, default=1000,
                                      help='Number of games to simulate')
        benchmark_parser.add_argument('--seed', type=int, default=None,
                                      help='Random seed for move selection')

        self.args = parser.parse_args(argv)

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(self.args.debug_level)
        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

    def run(self) -> int:
        """Run the selected command and return an exit code."""
        if not self.args:
            self.parse_args()

        if self.args.command == 'play':
            return self.play_game()
        elif self.args.command == 'show':
            return self.show_moves()
        elif self.args.command == 'benchmark':
            return self.benchmark()

        print("Please specify a command. Use --help for options.")
        return 1

    def play_game(self) -> int:
        """Play a hot-seat game until the players quit."""
        names = player_names(self.args.player1, self.args.player2)
        state = new_game()

        print("Starting a new Connect Four game!")
        print(f"{names[Player.ONE]} plays {Player.ONE}, {names[Player.TWO]} plays {Player.TWO}.")
        print(f"Enter a column number (0-{state.width - 1}) to drop a piece, "
              f"'{RESET}' to restart, '{QUIT}' to quit.")
        print(state.render())

        while True:
            if state.is_game_over():
                prompt = f"Game over. '{RESET}' to play again, '{QUIT}' to quit: "
            else:
                prompt = f"{names[state.current_player]} ({state.current_player}), your move: "

            move = self.get_human_move(prompt)
            if move is None:
                continue
            if move == QUIT:
                print("Quitting game.")
                return 0
            if move == RESET:
                state = new_game()
                debug.info("Game reset from the console", "cli")
                print("Game restarted.")
                print(state.render())
                continue

            try:
                state.apply_move(move)
            except GameOverError:
                print(f"The game is over. Enter '{RESET}' to start a new game.")
                continue
            except ColumnFullError:
                print(f"Column {move} is full. Pick another column.")
                continue
            except InvalidColumnError:
                print(f"Column must be between 0 and {state.width - 1}.")
                continue

            print(state.render())
            if state.is_game_over():
                print(describe_status(state, names))

    def get_human_move(self, prompt: str) -> Optional[Union[int, str]]:
        """
        Read one command from the player.

        Returns:
            A column number, QUIT, RESET, or None if the input was not understood
        """
        try:
            user_input = input(prompt).strip().lower()
        except EOFError:
            return QUIT

        if user_input in (QUIT, RESET):
            return user_input

        try:
            return int(user_input)
        except ValueError:
            print("Invalid input. Please enter a column number or a command.")
            return None

    def show_moves(self) -> int:
        """Replay the --moves list on a new game and print the outcome."""
        try:
            moves = parse_moves(self.args.moves)
        except ValueError as e:
            print(f"Error parsing moves: {e}")
            return 1

        names = dict(DEFAULT_NAMES)
        state = new_game()
        for number, column in enumerate(moves, start=1):
            try:
                state.apply_move(column)
            except MoveError as e:
                print(state.render())
                print(f"Move {number} (column {column}) rejected: {e}")
                return 1

        print(state.render())
        print(describe_status(state, names))
        winning_line = state.winning_line()
        if winning_line:
            print(f"Winning line: {winning_line}")
        return 0

    def benchmark(self) -> int:
        """Time board creation, random games and win checks."""
        iterations = self.args.iterations
        if iterations < 1:
            print("Iterations must be at least 1.")
            return 1
        rng = random.Random(self.args.seed)

        print(f"Running benchmark with {iterations} iterations...")

        debug.start_timer("new_game")
        for _ in range(iterations):
            new_game()
        new_game_time = debug.end_timer("new_game", "cli")
        print(f"Game creation: {new_game_time:.6f} seconds total, "
              f"{new_game_time / iterations * 1000:.6f} ms per game")

        finished: List[GameState] = []
        total_moves = 0
        debug.start_timer("random_games")
        for _ in range(iterations):
            state = new_game()
            while not state.is_game_over():
                state.apply_move(rng.choice(state.valid_moves()))
            total_moves += state.move_count
            finished.append(state)
        games_time = debug.end_timer("random_games", "cli")
        print(f"Played {iterations} games with {total_moves} moves: "
              f"{games_time:.6f} seconds total, "
              f"{games_time / total_moves * 1000:.6f} ms per move")

        debug.start_timer("win_checks")
        for state in finished:
            for player in (Player.ONE, Player.TWO):
                state.board.has_win(player)
        checks_time = debug.end_timer("win_checks", "cli")
        print(f"Performed {2 * iterations} win checks: {checks_time:.6f} seconds total, "
              f"{checks_time / (2 * iterations) * 1000:.6f} ms per check")

        outcomes = {status: 0 for status in GameStatus if status.is_game_over()}
        for state in finished:
            outcomes[state.status] += 1
        print("Outcomes: " + ", ".join(f"{status.name}={count}" for status, count in outcomes.items()))
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    cli.parse_args(argv)
    return cli.run()


if __name__ == "__main__":
    sys.exit(main())
