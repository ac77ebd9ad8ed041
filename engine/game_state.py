"""
Game state management for the TicTacToe engine.
Defines the marks, the flat 9-cell board, and a game session that tracks
turns and move history.
"""

from enum import Enum
from typing import Optional, List, Sequence, Tuple
from dataclasses import dataclass, field

from .config import EngineConfig
from .errors import MalformedBoardError


class Mark(Enum):
    """The two marks a player can place."""
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the opposite mark."""
        return Mark.O if self == Mark.X else Mark.X


# A cell is either empty (None) or holds a Mark.
# Boards are flat and row-major:
#   0 1 2
#   3 4 5
#   6 7 8
Cell = Optional[Mark]
Board = List[Cell]

# X always moves first
FIRST_PLAYER = Mark.X


def new_board(size: int = EngineConfig.BOARD_SIZE) -> Board:
    """Create an empty board."""
    return [None] * (size * size)


def empty_cells(board: Sequence[Cell]) -> List[int]:
    """Indices of all empty cells, in increasing order."""
    return [index for index, cell in enumerate(board) if cell is None]


def index_to_cell(index: int, size: int = EngineConfig.BOARD_SIZE) -> Tuple[int, int]:
    """Convert a flat index to (row, col)."""
    return divmod(index, size)


def cell_to_index(row: int, col: int, size: int = EngineConfig.BOARD_SIZE) -> int:
    """Convert (row, col) to a flat index."""
    return row * size + col


def parse_board(text: str, size: int = EngineConfig.BOARD_SIZE) -> Board:
    """
    Parse a board from a compact string such as "XX_OO____" or "XX_|OO_|___".

    Args:
        text: One character per cell. X and O (any case) are marks,
            "_", ".", "-" and space are empty. "|", "/" and newlines are skipped.
        size: Board side length.

    Returns:
        The parsed board.

    Raises:
        MalformedBoardError: On an unknown character or wrong cell count.
    """
    board: Board = []
    for char in text:
        if char in EngineConfig.SEPARATOR_SYMBOLS:
            continue
        if char in EngineConfig.EMPTY_SYMBOLS:
            board.append(None)
        elif char.upper() in ("X", "O"):
            board.append(Mark(char.upper()))
        else:
            raise MalformedBoardError(f"Invalid cell symbol {char!r} in {text!r}")

    if len(board) != size * size:
        raise MalformedBoardError(
            f"Board {text!r} has {len(board)} cells, expected {size * size}"
        )
    return board


def format_board(board: Sequence[Cell]) -> str:
    """Format a board as a compact string, e.g. "XX_OO____"."""
    return "".join(
        EngineConfig.EMPTY_DISPLAY if cell is None else cell.value
        for cell in board
    )


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Mark            # Who made the move
    index: int              # Cell index (0-8)
    move_number: int        # Which move of the game this is (0-8)


@dataclass
class GameState:
    """
    The complete state of one TicTacToe game.

    Tracks:
    - The board (flat list of 9 cells)
    - Current player
    - Move history
    - Game status (ongoing, won, draw)

    Winner and draw fields are filled in by WinChecker.update_game_state().
    """

    # The board - None means empty
    board: Board = field(default_factory=new_board)

    # Current player's turn
    current_player: Mark = FIRST_PLAYER

    # Move history
    moves: List[Move] = field(default_factory=list)

    # Game result
    winner: Optional[Mark] = None
    is_draw: bool = False
    is_game_over: bool = False

    def make_move(self, index: int) -> bool:
        """
        Place the current player's mark at the given cell.

        Args:
            index: Cell index (0-8).

        Returns:
            True if move was successful, False otherwise.
        """
        if self.is_game_over:
            print("Game is already over!")
            return False

        if not 0 <= index < len(self.board):
            print(f"Cell {index} is off the board!")
            return False

        if self.board[index] is not None:
            print(f"Cell {index} is already occupied!")
            return False

        self.board[index] = self.current_player
        self.moves.append(Move(
            player=self.current_player,
            index=index,
            move_number=len(self.moves)
        ))

        # Winner is checked by WinChecker, just switch turns here
        self.current_player = self.current_player.opposite()

        return True

    def get_empty_cells(self) -> List[int]:
        """Get the indices of all empty cells."""
        return empty_cells(self.board)

    def copy(self) -> "GameState":
        """Create a copy of the game state."""
        return GameState(
            board=list(self.board),
            current_player=self.current_player,
            moves=list(self.moves),
            winner=self.winner,
            is_draw=self.is_draw,
            is_game_over=self.is_game_over
        )

    def reset(self):
        """Start a new game on an empty board."""
        self.board = new_board(self.size)
        self.current_player = FIRST_PLAYER
        self.moves = []
        self.winner = None
        self.is_draw = False
        self.is_game_over = False

    @property
    def size(self) -> int:
        """Side length of the board."""
        return int(round(len(self.board) ** 0.5))

    def print_board(self):
        """Print the board to console."""
        size = self.size
        print()
        for row in range(size):
            cells = []
            for col in range(size):
                index = cell_to_index(row, col, size)
                cell = self.board[index]
                # Empty cells show their 1-based number for the console prompt
                cells.append(str(index + 1) if cell is None else cell.value)
            print(" " + " | ".join(cells))
            if row < size - 1:
                print("---" + "+---" * (size - 1))

        if self.is_game_over:
            if self.winner:
                print(f"\n{self.winner.value} WINS!")
            else:
                print("\nIt's a DRAW!")
        else:
            print(f"\nCurrent turn: {self.current_player.value}")
