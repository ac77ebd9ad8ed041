"""
Exceptions raised by the TicTacToe decision engine.

All of them are caller-contract violations: they are raised before any
search starts and are never retryable.
"""


class EngineError(Exception):
    """Base class for all engine errors."""
    pass


class MalformedBoardError(EngineError, ValueError):
    """Raised when a board has the wrong length or holds an invalid cell."""
    pass


class PreconditionViolation(EngineError, ValueError):
    """Raised when the engine is called with arguments it cannot decide on."""
    pass


class FullBoardError(PreconditionViolation):
    """Raised when a move is requested on a board with no empty cell."""
    pass


class IdenticalMarksError(PreconditionViolation):
    """Raised when the AI and its opponent are given the same mark."""
    pass
