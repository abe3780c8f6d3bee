"""Game state models."""

from enum import Enum, IntEnum

from pydantic import BaseModel


class GameStatus(str, Enum):
    """State of a game."""

    PLAYING = "playing"
    GAME_OVER = "game_over"


class Outcome(IntEnum):
    """Result of a battle or war."""

    PLAYER1 = 1
    PLAYER2 = 2
    DRAW = 3


class GameSnapshot(BaseModel):
    """Observable state of a game between turns."""

    turn_number: int = 0
    player1_cards: int = 0  # deck + win pile
    player2_cards: int = 0
    status: GameStatus = GameStatus.PLAYING

    @property
    def is_over(self) -> bool:
        """Check if the game has ended."""
        return self.status == GameStatus.GAME_OVER

    @property
    def total_cards(self) -> int:
        """Get number of cards in play."""
        return self.player1_cards + self.player2_cards

    def __str__(self) -> str:
        parts = [
            f"Turn {self.turn_number}",
            f"P1:{self.player1_cards} | P2:{self.player2_cards}",
        ]
        if self.is_over:
            parts.append("[GAME OVER]")
        return " ".join(parts)
