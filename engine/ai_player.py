"""
AI player for the TicTacToe engine.
Uses exhaustive Minimax to choose a move that never loses.
"""

from typing import Optional, Dict, List, Sequence

from .config import EngineConfig
from .errors import FullBoardError
from .game_state import Mark, Cell, empty_cells, index_to_cell
from .move_validator import MoveValidator
from .win_checker import WinChecker, Outcome


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI will always play optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).

    The search is exhaustive (no pruning). Scores are from the AI's point
    of view: WIN_SCORE - depth for a win, depth - WIN_SCORE for a loss and
    DRAW_SCORE for a draw, so faster wins and slower losses are preferred.
    Among equally scored moves the lowest cell index is played.
    """

    def __init__(
        self,
        player: Mark = Mark.O,
        opponent: Optional[Mark] = None,
        size: int = EngineConfig.BOARD_SIZE,
        verbose: bool = EngineConfig.DEBUG_MODE
    ):
        """
        Initialize the AI player.

        Args:
            player: Which mark the AI controls (default: O)
            opponent: The other side's mark (default: the opposite of player)
            size: Board side length. Exhaustive search is only practical at 3.
            verbose: Print search statistics after every decision.

        Raises:
            PreconditionViolation: If a mark is not a Mark.
            IdenticalMarksError: If player and opponent are the same mark.
        """
        if opponent is None and isinstance(player, Mark):
            opponent = player.opposite()

        self.validator = MoveValidator(size)
        self.validator.check_marks(player, opponent)

        self.player = player
        self.opponent = opponent
        self.win_checker = WinChecker(size)
        self.verbose = verbose

        # Keep track of how many positions we've evaluated (for debugging)
        self.positions_evaluated = 0

    def get_best_move(self, board: Sequence[Cell]) -> int:
        """
        Get the best move for the AI on this board.

        The caller's board is not modified.

        Args:
            board: Flat board with at least one empty cell.

        Returns:
            Index of the best cell.

        Raises:
            MalformedBoardError: If the board is not well-formed.
            FullBoardError: If there is no empty cell.
        """
        scores = self.score_moves(board)

        best_score = float('-inf')
        best_move = -1

        # Strict > keeps the lowest index among equal scores
        for index, score in scores.items():
            if score > best_score:
                best_score = score
                best_move = index

        if self.verbose:
            print(
                f"AI evaluated {self.positions_evaluated} positions. "
                f"Best move: {best_move} (score: {best_score})"
            )

        return best_move

    def score_moves(self, board: Sequence[Cell]) -> Dict[int, int]:
        """
        Score every candidate move for the AI.

        Args:
            board: Flat board with at least one empty cell.

        Returns:
            Dict of cell index -> minimax score, in increasing index order.

        Raises:
            MalformedBoardError: If the board is not well-formed.
            FullBoardError: If there is no empty cell.
        """
        self.validator.check_board(board)

        # The search owns this copy and restores every cell it sets
        work = list(board)
        candidates = empty_cells(work)
        if not candidates:
            raise FullBoardError("No empty cell left to play")

        self.positions_evaluated = 0

        scores = {}
        for index in candidates:
            work[index] = self.player
            # Next ply is the opponent's
            scores[index] = self._minimax(work, 0, False)
            work[index] = None

        return scores

    def evaluate(
        self,
        board: Sequence[Cell],
        depth: int = 0,
        is_maximizing: bool = True
    ) -> int:
        """
        Minimax value of a board from the AI's point of view.

        Args:
            board: Flat board.
            depth: Plies already played from the root of the search.
            is_maximizing: True if the AI is the side to move.

        Returns:
            Score in [-WIN_SCORE, WIN_SCORE].

        Raises:
            MalformedBoardError: If the board is not well-formed.
        """
        self.validator.check_board(board)
        self.positions_evaluated = 0
        return self._minimax(list(board), depth, is_maximizing)

    def _minimax(self, board: List[Cell], depth: int, is_maximizing: bool) -> int:
        """
        Minimax algorithm without pruning.

        Places marks on the board in place and removes them again before
        returning, so the board is unchanged afterwards.

        Args:
            board: Working board, mutated and restored.
            depth: Current depth of the search.
            is_maximizing: True if it's the AI's hypothetical turn.

        Returns:
            The score of the position.
        """
        self.positions_evaluated += 1

        # Check terminal states
        result = self.win_checker.classify(board)

        if result.winner == self.player:
            return EngineConfig.WIN_SCORE - depth  # Win (prefer faster wins)
        elif result.winner == self.opponent:
            return depth - EngineConfig.WIN_SCORE  # Loss (prefer slower losses)
        elif result.outcome is Outcome.DRAW:
            return EngineConfig.DRAW_SCORE

        if is_maximizing:
            max_score = float('-inf')
            for index in empty_cells(board):
                board[index] = self.player
                score = self._minimax(board, depth + 1, False)
                board[index] = None
                max_score = max(max_score, score)
            return max_score
        else:
            min_score = float('inf')
            for index in empty_cells(board):
                board[index] = self.opponent
                score = self._minimax(board, depth + 1, True)
                board[index] = None
                min_score = min(min_score, score)
            return min_score

    def get_move_suggestion(self, board: Sequence[Cell]) -> str:
        """
        Get a human-readable move suggestion.

        Args:
            board: Current board.

        Returns:
            A string describing the suggested move.
        """
        if not empty_cells(board):
            return "No moves available!"

        index = self.get_best_move(board)
        row, col = index_to_cell(index, self.win_checker.size)

        return f"Place {self.player.value} at cell {index} (row {row}, col {col})"


def _check_marks(ai_mark: Mark, opponent_mark: Mark):
    # Both marks are explicit here, no default opponent
    MoveValidator().check_marks(ai_mark, opponent_mark)


def minimax(
    board: Sequence[Cell],
    depth: int,
    maximizing: bool,
    ai_mark: Mark,
    opponent_mark: Mark
) -> int:
    """
    Minimax value of a 3x3 board for ai_mark.

    Args:
        board: Flat board of 9 cells.
        depth: Plies already played from the root.
        maximizing: True if ai_mark is the side to move.
        ai_mark: The AI's mark.
        opponent_mark: The opponent's mark.

    Returns:
        10 - depth for a reachable win, depth - 10 for a loss, 0 for a draw.
    """
    _check_marks(ai_mark, opponent_mark)
    return AIPlayer(ai_mark, opponent_mark).evaluate(board, depth, maximizing)


def best_move(board: Sequence[Cell], ai_mark: Mark, opponent_mark: Mark) -> int:
    """
    Index of a non-losing move for ai_mark on a 3x3 board.

    Raises:
        MalformedBoardError: If the board is not 9 valid cells.
        FullBoardError: If there is no empty cell.
        IdenticalMarksError: If ai_mark == opponent_mark.
    """
    _check_marks(ai_mark, opponent_mark)
    return AIPlayer(ai_mark, opponent_mark).get_best_move(board)
