"""
Win/loss/draw tally for one player across several games.
Kept in memory only.
"""

from typing import Dict, Optional
from dataclasses import dataclass

from .game_state import GameState, Mark


@dataclass
class GameStats:
    """
    Results from one player's point of view.
    """
    player: Mark = Mark.X
    won: int = 0
    lost: int = 0
    draw: int = 0

    def record(self, winner: Optional[Mark]):
        """
        Count one finished game.

        Args:
            winner: The winning mark, or None for a draw.
        """
        if winner is None:
            self.draw += 1
        elif winner == self.player:
            self.won += 1
        else:
            self.lost += 1

    def record_game(self, game_state: GameState) -> bool:
        """
        Count a game if it is over.

        Returns:
            True if the game was counted.
        """
        if not game_state.is_game_over:
            return False

        self.record(game_state.winner)
        return True

    @property
    def total(self) -> int:
        return self.won + self.lost + self.draw

    def as_dict(self) -> Dict[str, int]:
        return {"won": self.won, "lost": self.lost, "draw": self.draw}

    def summary(self) -> str:
        return f"Won: {self.won}  Lost: {self.lost}  Draw: {self.draw}"
