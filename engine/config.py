"""
Engine configuration for the TicTacToe decision engine.
Board geometry, search scores, and display settings.
"""


class EngineConfig:
    """
    Configuration class for engine settings.

    The search is exhaustive, so there is nothing to tune for strength:
    these values describe the board and how results are scored.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9 cells, indices 0-8

    # Cell index of the center square
    CENTER_INDEX = CELL_COUNT // 2  # 4

    # ==================== SEARCH SCORES ====================
    # A win found at depth d scores WIN_SCORE - d, a loss d - WIN_SCORE
    WIN_SCORE = 10
    DRAW_SCORE = 0

    # ==================== BOARD STRINGS ====================
    # Characters accepted as an empty cell when parsing "XX_OO____" strings
    EMPTY_SYMBOLS = ("_", ".", "-", " ")
    # Characters skipped when parsing (row separators)
    SEPARATOR_SYMBOLS = ("|", "/", "\n", "\t")
    # Character used for empty cells when formatting
    EMPTY_DISPLAY = "_"

    # ==================== DEBUG SETTINGS ====================
    # Print search statistics after every decision
    DEBUG_MODE = False
