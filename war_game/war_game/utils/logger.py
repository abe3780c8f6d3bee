"""Logging utilities and game state display."""

import logging
import sys
from typing import TYPE_CHECKING

from war_game.models.game_state import Outcome

if TYPE_CHECKING:
    from war_game.game.engine import TurnResult
    from war_game.models.game_state import GameSnapshot


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


class GameDisplay:
    """Display game state to stdout."""

    def __init__(self, show_cards: bool = False, show_score: bool = True):
        """Initialize display.

        Args:
            show_cards: Whether to show the cards played each turn
            show_score: Whether to show the score after each turn
        """
        self.show_cards = show_cards
        self.show_score = show_score

    def print_separator(self) -> None:
        """Print a separator line."""
        print("=" * 60)

    def print_score(self, snapshot: "GameSnapshot") -> None:
        """Print both players' card counts, and the winner if there is one."""
        print(
            f"Player One has {snapshot.player1_cards} cards left.   "
            f"Player Two has {snapshot.player2_cards} cards left."
        )
        if snapshot.player1_cards == 0:
            print("Player Two has won!")
        elif snapshot.player2_cards == 0:
            print("Player One has won!")

    def print_turn(self, result: "TurnResult", snapshot: "GameSnapshot") -> None:
        """Print what happened in a turn."""
        if self.show_cards:
            print(f"Player 1 shows: {result.card1}  Player 2 shows: {result.card2}")
            if result.is_war:
                self.print_war(result)
        if self.show_score:
            self.print_score(snapshot)
            print()

    def print_war(self, result: "TurnResult") -> None:
        """Print the outcome of a war."""
        rounds = f" x{result.war_rounds}" if result.war_rounds > 1 else ""
        print(f"WAR!{rounds}")
        if result.outcome == Outcome.PLAYER1:
            print("Player 1 Won the War")
        elif result.outcome == Outcome.PLAYER2:
            print("Player 2 Won the War")
        else:
            print("The War was a Draw ... bummer ...")

    def print_game_end(self, snapshot: "GameSnapshot") -> None:
        """Print the number of turns played."""
        self.print_separator()
        print(f"{snapshot.turn_number} turns were played")
