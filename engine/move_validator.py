"""
Move validator for the TicTacToe engine.
Checks boards and marks before a search, and human moves during a game.
"""

from typing import Optional, List, Sequence
from dataclasses import dataclass

from .config import EngineConfig
from .errors import (
    MalformedBoardError,
    PreconditionViolation,
    IdenticalMarksError,
)
from .game_state import GameState, Mark, Cell, empty_cells


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates boards, marks and moves.

    Rules:
    1. A board has exactly size*size cells, each None or a Mark
    2. The AI and its opponent use different marks
    3. Moves go on empty cells of a game that is not over
    """

    def __init__(self, size: int = EngineConfig.BOARD_SIZE):
        self.size = size

    def check_board(self, board: Sequence[Cell]):
        """
        Make sure a board is well-formed.

        Raises:
            MalformedBoardError: Wrong length or a cell outside {None, X, O}.
        """
        try:
            length = len(board)
        except TypeError:
            raise MalformedBoardError(
                f"Board must be a sequence of cells, got {type(board).__name__}"
            ) from None

        expected = self.size * self.size
        if length != expected:
            raise MalformedBoardError(
                f"Board has {length} cells, expected {expected}"
            )

        for index, cell in enumerate(board):
            if cell is not None and not isinstance(cell, Mark):
                raise MalformedBoardError(
                    f"Invalid cell {cell!r} at index {index}"
                )

    def check_marks(self, ai_mark: Mark, opponent_mark: Mark):
        """
        Make sure the two marks are valid and different.

        Raises:
            PreconditionViolation: A mark is not a Mark.
            IdenticalMarksError: Both sides were given the same mark.
        """
        for mark in (ai_mark, opponent_mark):
            if not isinstance(mark, Mark):
                raise PreconditionViolation(f"Invalid mark {mark!r}")

        if ai_mark == opponent_mark:
            raise IdenticalMarksError(
                f"AI and opponent must use different marks, both are {ai_mark.value}"
            )

    def validate_move(self, game_state: GameState, index: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            index: Cell to place the mark on (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if game is over
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # Check if index is in valid range
        cell_count = len(game_state.board)
        if not 0 <= index < cell_count:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {index}. Must be 0-{cell_count - 1}."
            )

        # Check if cell is empty
        occupant = game_state.board[index]
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {occupant.value}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all valid moves for the current player.

        Args:
            game_state: Current game state.

        Returns:
            List of valid cell indices, empty once the game is over.
        """
        if game_state.is_game_over:
            return []

        return empty_cells(game_state.board)
