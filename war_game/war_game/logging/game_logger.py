"""Game logger for detailed game replay."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any, TextIO

from war_game.config import GameLogConfig
from war_game.models.card import Card
from war_game.models.game_state import GameSnapshot, Outcome

from .formatters import format_card, format_cards

if TYPE_CHECKING:
    from war_game.game.engine import TurnResult


# Outcome to string mapping for log output
OUTCOME_NAMES: dict[Outcome, str] = {
    Outcome.PLAYER1: "player1",
    Outcome.PLAYER2: "player2",
    Outcome.DRAW: "draw",
}


class GameLogger:
    """Logger for detailed game events in JSONL format.

    Each line in the output file is a JSON object representing one event.
    This allows step-by-step replay of the game.
    """

    def __init__(self, config: GameLogConfig | None = None):
        """Initialize game logger.

        Args:
            config: Logging configuration. If None, logging is disabled.
        """
        self.config = config or GameLogConfig()
        self._file: TextIO | None = None

    def __enter__(self) -> GameLogger:
        """Context manager entry."""
        if self.config.enabled and self.config.output_path:
            path = Path(self.config.output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(path, "a", encoding="utf-8")
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the log file."""
        if self._file:
            self._file.close()
            self._file = None

    def _write(self, event: dict[str, Any]) -> None:
        """Write an event to the log file.

        Args:
            event: Event dictionary to write as JSON.
        """
        if self._file:
            self._file.write(json.dumps(event, ensure_ascii=False) + "\n")
            self._file.flush()

    def log_game_start(
        self,
        seed: int | None,
        deck1: list[Card],
        deck2: list[Card],
    ) -> None:
        """Log game start with the dealt decks.

        Args:
            seed: Seed the game was created with (None if unseeded).
            deck1: Player 1's deck, bottom first.
            deck2: Player 2's deck, bottom first.
        """
        self._write({
            "type": "game_start",
            "timestamp": datetime.now().isoformat(),
            "seed": seed,
            "decks": {"1": format_cards(deck1), "2": format_cards(deck2)},
        })

    def log_turn(self, result: TurnResult, snapshot: GameSnapshot) -> None:
        """Log a single turn.

        Args:
            result: Result of the turn.
            snapshot: Game state after the turn.
        """
        record: dict[str, Any] = {
            "type": "turn",
            "turn": result.turn_number,
            "shown": {"1": format_card(result.card1), "2": format_card(result.card2)},
            "outcome": OUTCOME_NAMES[result.outcome],
            "scores": {"1": snapshot.player1_cards, "2": snapshot.player2_cards},
        }
        if result.is_war:
            record["war"] = {
                "rounds": result.war_rounds,
                "cards": {
                    "1": format_cards(result.war_cards1),
                    "2": format_cards(result.war_cards2),
                },
            }
        self._write(record)

    def log_game_end(self, snapshot: GameSnapshot, winner: Outcome | None) -> None:
        """Log game end with results.

        Args:
            snapshot: Final game state.
            winner: Winning player, or None if nobody holds all cards.
        """
        self._write({
            "type": "game_end",
            "turns": snapshot.turn_number,
            "winner": OUTCOME_NAMES[winner] if winner is not None else None,
            "scores": {"1": snapshot.player1_cards, "2": snapshot.player2_cards},
        })
