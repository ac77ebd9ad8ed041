"""
Console front-end for the TicTacToe engine.

Modes:
- human:  play against the engine in the terminal
- self:   the engine plays itself (always a draw)
- random: the engine plays an opponent that moves at random

Run this script to play TicTacToe against the engine!
"""

from typing import Optional

import numpy as np

from engine.ai_player import AIPlayer
from engine.game_state import GameState, Mark
from engine.move_validator import MoveValidator
from engine.stats import GameStats
from engine.win_checker import WinChecker


class TicTacToeConsole:
    """
    Human vs engine game in the terminal.

    Game flow:
    1. X moves first (human or engine, depending on --ai-first)
    2. Human types a cell number 1-9
    3. Engine answers with its best move
    4. Repeat until someone wins or it's a draw
    """

    def __init__(self, human_player: Mark = Mark.X, verbose: bool = False):
        """
        Initialize the console game.

        Args:
            human_player: Which mark the human plays.
            verbose: Print search statistics for every engine move.
        """
        self.human_player = human_player
        self.ai_player = human_player.opposite()

        self.game_state = GameState()
        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.ai = AIPlayer(self.ai_player, verbose=verbose)
        self.stats = GameStats(human_player)

        print("\n" + "=" * 60)
        print("   TicTacToe - Ready!")
        print(f"   Human plays: {self.human_player.value}")
        print(f"   Engine plays: {self.ai_player.value}")
        print("   X moves first. Cells are numbered 1-9.")
        print("=" * 60)

    def run(self):
        """Play rounds until the human stops."""
        while True:
            self.play_round()
            print(f"\n{self.stats.summary()}")

            answer = input("\nPlay again? [y/n]: ").strip().lower()
            if answer not in ("y", "yes"):
                break
            self._reset_game()

    def play_round(self):
        """Play one game to the end."""
        self.game_state.print_board()

        while not self.game_state.is_game_over:
            if self.game_state.current_player == self.human_player:
                self._human_move()
            else:
                self._ai_move()

            self.win_checker.update_game_state(self.game_state)
            self.game_state.print_board()

        self.stats.record_game(self.game_state)
        self._show_game_result()

    def _human_move(self):
        """Read moves from the human until one is valid."""
        while True:
            text = input(f"\nPlay {self.human_player.value} at [1-9]: ").strip()
            try:
                index = int(text) - 1
            except ValueError:
                index = -1

            if not 0 <= index < len(self.game_state.board):
                print("Please type a number 1-9.")
                continue

            result = self.validator.validate_move(self.game_state, index)
            if not result.is_valid:
                print(result.error_message)
                continue

            self.game_state.make_move(index)
            return

    def _ai_move(self):
        """Play the engine's move."""
        print("\n>>> Engine is thinking...")

        index = self.ai.get_best_move(self.game_state.board)
        self.game_state.make_move(index)

        print(f">>> Engine plays {self.ai_player.value} at {index + 1}")

    def _show_game_result(self):
        """Show the final game result."""
        print("\n" + "=" * 60)
        print("   GAME OVER!")
        print("=" * 60)

        winner = self.game_state.winner
        if winner is None:
            print("\nIt's a draw! Good game!")
        elif winner == self.human_player:
            print("\nCongratulations! You won!")
        else:
            print("\nEngine wins! Better luck next time!")

    def _reset_game(self):
        """Reset the game for a new round."""
        self.game_state.reset()


def simulate(
    mode: str = "random",
    games: int = 10,
    ai_first: bool = False,
    seed: Optional[int] = None,
    verbose: bool = False
) -> GameStats:
    """
    Play the engine against itself or a random opponent.

    Args:
        mode: "self" or "random".
        games: Number of games to play.
        ai_first: If True, the engine plays X and moves first.
        seed: Seed for the random opponent.
        verbose: Print search statistics for every engine move.

    Returns:
        GameStats from the engine's point of view.
    """
    ai_mark = Mark.X if ai_first else Mark.O
    ai = AIPlayer(ai_mark, verbose=verbose)
    opponent = AIPlayer(ai_mark.opposite()) if mode == "self" else None
    rng = np.random.default_rng(seed)

    win_checker = WinChecker()
    stats = GameStats(ai_mark)

    for game_number in range(games):
        game_state = GameState()

        while not game_state.is_game_over:
            if game_state.current_player == ai_mark:
                index = ai.get_best_move(game_state.board)
            elif opponent is not None:
                index = opponent.get_best_move(game_state.board)
            else:
                index = int(rng.choice(game_state.get_empty_cells()))

            game_state.make_move(index)
            win_checker.update_game_state(game_state)

        stats.record_game(game_state)

        result = game_state.winner.value + " wins" if game_state.winner else "draw"
        moves = " ".join(str(move.index + 1) for move in game_state.moves)
        print(f"Game {game_number + 1}: {result}  ({moves})")

    return stats


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe engine")
    parser.add_argument(
        "--mode",
        choices=["human", "self", "random"],
        default="human",
        help="Who the engine plays against"
    )
    parser.add_argument(
        "--ai-first",
        action="store_true",
        help="Let the engine play first (as X)"
    )
    parser.add_argument(
        "--games",
        type=int,
        default=10,
        help="Number of games in self/random mode"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random opponent"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print search statistics for every engine move"
    )

    args = parser.parse_args()

    if args.mode != "human":
        stats = simulate(
            mode=args.mode,
            games=args.games,
            ai_first=args.ai_first,
            seed=args.seed,
            verbose=args.verbose
        )
        print(f"\nEngine results - {stats.summary()}")
        return

    human_player = Mark.O if args.ai_first else Mark.X
    game = TicTacToeConsole(human_player=human_player, verbose=args.verbose)

    try:
        game.run()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
