"""
TicTacToe decision engine.
Classifies boards and picks moves that never lose.
"""

__version__ = "1.0.0"

from .config import EngineConfig
from .errors import (
    EngineError,
    MalformedBoardError,
    PreconditionViolation,
    FullBoardError,
    IdenticalMarksError,
)
from .game_state import (
    GameState,
    Mark,
    Move,
    new_board,
    empty_cells,
    parse_board,
    format_board,
)
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker, Classification, Outcome, classify, winning_lines
from .ai_player import AIPlayer, minimax, best_move
from .stats import GameStats
