"""Player model."""

import logging

from pydantic import BaseModel, ConfigDict, Field

from .card import Card
from .deck import ShuffledDeck

logger = logging.getLogger(__name__)

PLAYER_NAMES = {
    1: "Player One",
    2: "Player Two",
}


class PlayerState(BaseModel):
    """Cards held by one player.

    Cards only move between a player's own deck and win pile, or into the
    opponent's win pile when lost. war_cards holds the cards staged during
    a war and is empty between turns.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    player_id: int  # 1 or 2
    deck: ShuffledDeck = Field(default_factory=ShuffledDeck)
    win_pile: list[Card] = Field(default_factory=list)
    war_cards: list[Card] = Field(default_factory=list)

    @property
    def name(self) -> str:
        """Display name."""
        return PLAYER_NAMES.get(self.player_id, f"Player {self.player_id}")

    def total_cards(self) -> int:
        """Get number of cards owned (deck + win pile)."""
        return self.deck.size() + len(self.win_pile)

    def is_out_of_cards(self) -> bool:
        """Check if both deck and win pile are empty."""
        return self.deck.is_empty() and not self.win_pile

    def replenish(self) -> bool:
        """Turn the win pile into a reshuffled deck if the deck is empty.

        Returns:
            True if the deck was replaced, False if it still had cards.
        """
        if not self.deck.is_empty():
            return False

        self.deck.assign(self.win_pile)
        self.win_pile.clear()
        self.deck.shuffle()
        logger.debug(f"{self.name} picked up win pile ({self.deck.size()} cards)")
        return True

    def stage_war_card(self) -> Card:
        """Move the top card of the deck into the war cards."""
        card = self.deck.deal_top()
        self.war_cards.append(card)
        return card

    def collect(self, cards: list[Card]) -> None:
        """Add cards to the win pile."""
        self.win_pile.extend(cards)

    def __str__(self) -> str:
        return f"{self.name}[{self.total_cards()} cards]"

    def __repr__(self) -> str:
        return (
            f"PlayerState(id={self.player_id}, deck={self.deck.size()}, "
            f"win_pile={len(self.win_pile)}, war_cards={len(self.war_cards)})"
        )
