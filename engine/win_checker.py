"""
Win checker for the TicTacToe engine.
Classifies a board as a win for one mark, a draw, or still in play.
"""

from enum import Enum
from typing import Optional, List, Sequence, Tuple
from dataclasses import dataclass

import numpy as np

from .config import EngineConfig
from .game_state import GameState, Mark, Cell
from .move_validator import MoveValidator


Line = Tuple[int, ...]


def winning_lines(size: int = EngineConfig.BOARD_SIZE) -> List[Line]:
    """
    Build every winning line for a size x size board.

    Lines come in a fixed order: rows top to bottom, columns left to right,
    then the main diagonal and the anti-diagonal.

    Args:
        size: Board side length.

    Returns:
        List of index tuples into the flat board.
    """
    grid = np.arange(size * size).reshape(size, size)

    lines = list(grid) + list(grid.T) + [np.diag(grid), np.diag(np.fliplr(grid))]

    return [tuple(int(index) for index in line) for line in lines]


class Outcome(Enum):
    """How a board stands."""
    WIN = "win"
    DRAW = "draw"
    NON_TERMINAL = "non_terminal"


@dataclass(frozen=True)
class Classification:
    """
    Result of classifying a board.

    winner and line are only set when outcome is WIN.
    """
    outcome: Outcome
    winner: Optional[Mark] = None
    line: Optional[Line] = None

    @property
    def is_terminal(self) -> bool:
        """True if the game is over (win or draw)."""
        return self.outcome is not Outcome.NON_TERMINAL

    @classmethod
    def win(cls, mark: Mark, line: Line) -> "Classification":
        return cls(Outcome.WIN, mark, line)

    @classmethod
    def draw(cls) -> "Classification":
        return cls(Outcome.DRAW)

    @classmethod
    def non_terminal(cls) -> "Classification":
        return cls(Outcome.NON_TERMINAL)


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: a full line of the same mark
    (horizontally, vertically, or diagonally).

    When a constructed board completes several lines, the first one in
    WINNING_LINES order decides the result.
    """

    # All 8 winning lines of the 3x3 board, in canonical order
    WINNING_LINES = winning_lines(EngineConfig.BOARD_SIZE)

    def __init__(self, size: int = EngineConfig.BOARD_SIZE):
        """
        Initialize the win checker.

        Args:
            size: Board side length. Only 3 is played; other sizes build
                their own line table.
        """
        self.size = size
        if size == EngineConfig.BOARD_SIZE:
            self.lines = self.WINNING_LINES
        else:
            self.lines = winning_lines(size)

    def classify(self, board: Sequence[Cell]) -> Classification:
        """
        Classify a board. Does not validate it.

        Args:
            board: Flat board.

        Returns:
            Classification: WIN with winner and line, DRAW, or NON_TERMINAL.
        """
        for line in self.lines:
            winner = self._check_line(board, line)
            if winner is not None:
                return Classification.win(winner, line)

        if None not in board:
            return Classification.draw()

        return Classification.non_terminal()

    def check_winner(self, board: Sequence[Cell]) -> Optional[Mark]:
        """
        Check if there's a winner.

        Returns:
            The winning Mark, or None if no winner yet.
        """
        return self.classify(board).winner

    def check_draw(self, board: Sequence[Cell]) -> bool:
        """
        Check if the game is a draw (full board and no winner).
        """
        return self.classify(board).outcome is Outcome.DRAW

    def get_winning_line(self, board: Sequence[Cell]) -> Optional[Line]:
        """
        Get the winning line if there is one.

        Returns:
            The winning line as a tuple of indices, or None.
        """
        return self.classify(board).line

    def _check_line(self, board: Sequence[Cell], line: Line) -> Optional[Mark]:
        """
        Check if a single line has a winner.

        Returns:
            The Mark filling the whole line, None otherwise.
        """
        first = board[line[0]]
        if first is None:
            return None  # Empty cell, no winner on this line

        for index in line[1:]:
            if board[index] != first:
                return None

        return first

    def update_game_state(self, game_state: GameState) -> GameState:
        """
        Update the game state with winner/draw information.

        Args:
            game_state: The game state to update.

        Returns:
            Updated game state.
        """
        result = self.classify(game_state.board)

        if result.outcome is Outcome.WIN:
            game_state.winner = result.winner
            game_state.is_game_over = True
        elif result.outcome is Outcome.DRAW:
            game_state.is_draw = True
            game_state.is_game_over = True

        return game_state


_default_checker = WinChecker()
_default_validator = MoveValidator()


def classify(board: Sequence[Cell]) -> Classification:
    """
    Validate and classify a 3x3 board.

    Raises:
        MalformedBoardError: If the board is not 9 valid cells.
    """
    _default_validator.check_board(board)
    return _default_checker.classify(board)
